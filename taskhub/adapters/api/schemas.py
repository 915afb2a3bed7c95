# taskhub/adapters/api/schemas.py
"""
Request and response bodies.

Requests only check that the fields are present strings; names, titles and
emails are validated by the domain so the error comes back as VALIDATION_ERROR.
"""
from pydantic import BaseModel, Field

from taskhub.core.domain.models import Task, User

# --- Requests ---

class CreateUserRequest(BaseModel):
    name: str = Field(..., description="Display name of the user")
    email: str = Field(..., description="Contact email, unique across users")


class UpdateUserRequest(BaseModel):
    name: str
    email: str


class CreateTaskRequest(BaseModel):
    user_id: str = Field(..., description="Id of the owning user")
    title: str
    description: str = Field("", description="Free text, may be empty")

# --- Responses ---

class UserResponse(BaseModel):
    id: str
    name: str
    email: str

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(id=user.id.value, name=user.name, email=user.email.value)


class TaskResponse(BaseModel):
    id: str
    user_id: str
    title: str
    description: str
    completed: bool

    @classmethod
    def from_domain(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id.value,
            user_id=task.user_id.value,
            title=task.title,
            description=task.description,
            completed=task.is_completed(),
        )


class ErrorResponse(BaseModel):
    code: str
    message: str
