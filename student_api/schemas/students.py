import uuid

from pydantic import BaseModel, ConfigDict, Field

from student_api.models.student import Student


class StudentIn(BaseModel):
    """Request body for create and upsert.

    Length/presence rules live in ``services.student_validator``; this
    shape only binds the payload.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "FirstName": "firstname",
                "LastName": "lastname",
                "Program": "noprogram",
            }
        },
    )

    first_name: str | None = Field(None, alias="FirstName")
    last_name: str | None = Field(None, alias="LastName")
    program: str | None = Field(None, alias="Program")


class StudentOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: uuid.UUID
    first_name: str = Field(alias="FirstName")
    last_name: str = Field(alias="LastName")
    program: str | None = Field(None, alias="Program")

    @classmethod
    def from_model(cls, st: Student) -> "StudentOut":
        return cls(
            id=st.id,
            first_name=st.first_name,
            last_name=st.last_name,
            program=st.program,
        )


class FieldErrorOut(BaseModel):
    field: str
    message: str


class ValidationErrorOut(BaseModel):
    detail: str = "Validation failed"
    errors: list[FieldErrorOut] = []


class ErrorOut(BaseModel):
    detail: str
