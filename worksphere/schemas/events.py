from pydantic import BaseModel

class ProjectRef(BaseModel):
    id: str
    name: str

class TaskRef(BaseModel):
    id: str
    title: str

class MemberRef(BaseModel):
    id: str
    name: str

class ProjectCreatedIn(BaseModel):
    project: ProjectRef

class TaskEventIn(BaseModel):
    task: TaskRef
    project_owner_id: str

class TeamMemberAddedIn(BaseModel):
    member: MemberRef
    project_id: str
    project_owner_id: str
