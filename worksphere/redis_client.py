import redis

from worksphere.config import Settings

def make_redis(s: Settings) -> redis.Redis:
    return redis.Redis.from_url(s.redis_url, decode_responses=True)

# redis connectivity check
def redis_ping(client: redis.Redis) -> bool:
    try:
        return bool(client.ping())
    except Exception:
        return False
