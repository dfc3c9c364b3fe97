# student_api/api/routes/students.py
import uuid

from fastapi import APIRouter, Depends, Request, Response, status

from student_api.core.errors import NotFoundError, ValidationError
from student_api.core.logging import get_logger
from student_api.models.student import Student
from student_api.repositories.students import StudentStore, get_student_store
from student_api.schemas.students import (
    ErrorOut,
    StudentIn,
    StudentOut,
    ValidationErrorOut,
)
from student_api.services.student_validator import (
    StudentFields,
    parse_student_id,
    validate_student_input,
)

router = APIRouter(prefix="/students", tags=["students"])

BAD_REQUEST = {"model": ValidationErrorOut, "description": "Malformed Student or id"}
NOT_FOUND = {"model": ErrorOut, "description": "Student not found"}
INTERNAL_ERROR = {"model": ErrorOut, "description": "Internal error"}


def _validated(payload: StudentIn) -> StudentFields:
    result = validate_student_input(payload)
    if not result.ok:
        raise ValidationError(result.errors)
    return result.value


@router.get(
    "",
    response_model=list[StudentOut],
    responses={500: INTERNAL_ERROR},
)
def list_students(store: StudentStore = Depends(get_student_store)):  # noqa: B008
    """Get the collection of Students."""
    return [StudentOut.from_model(st) for st in store.list()]


@router.get(
    "/{student_id}",
    response_model=StudentOut,
    name="get_student",
    responses={400: BAD_REQUEST, 404: NOT_FOUND, 500: INTERNAL_ERROR},
)
def get_student(
    student_id: str,
    store: StudentStore = Depends(get_student_store),  # noqa: B008
):
    """Get a Student by id."""
    sid = parse_student_id(student_id)
    st = store.find_by_id(sid)
    if st is None:
        get_logger().info("student.not_found", student_id=str(sid))
        raise NotFoundError("Student", sid)
    return StudentOut.from_model(st)


@router.post(
    "",
    response_model=StudentOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: BAD_REQUEST, 500: INTERNAL_ERROR},
)
def create_student(
    payload: StudentIn,
    request: Request,
    response: Response,
    store: StudentStore = Depends(get_student_store),  # noqa: B008
):
    """
    Creates a Student.

    The id is generated here; the response carries a Location header that
    points at ``GET /students/{id}``.
    """
    fields = _validated(payload)

    st = Student(
        id=uuid.uuid4(),
        first_name=fields.first_name,
        last_name=fields.last_name,
        program=fields.program,
    )
    store.insert(st)
    store.commit()

    get_logger().info("student.created", student_id=str(st.id))
    response.headers["Location"] = str(
        request.url_for("get_student", student_id=str(st.id))
    )
    return StudentOut.from_model(st)


@router.put(
    "/{student_id}",
    response_model=StudentOut,
    responses={400: BAD_REQUEST, 404: NOT_FOUND, 500: INTERNAL_ERROR},
)
def upsert_student(
    student_id: str,
    payload: StudentIn,
    store: StudentStore = Depends(get_student_store),  # noqa: B008
):
    """
    Updates an existing Student in place.

    Only updates: an unknown id answers 404 and nothing is inserted.
    """
    sid = parse_student_id(student_id)
    fields = _validated(payload)

    if not store.exists(sid):
        get_logger().info("student.not_found", student_id=str(sid))
        raise NotFoundError("Student", sid)

    st = store.find_by_id(sid)
    if st is None:
        # removed between exists() and the load
        raise NotFoundError("Student", sid)

    st.first_name = fields.first_name
    st.last_name = fields.last_name
    st.program = fields.program
    store.update(st)
    store.commit()

    get_logger().info("student.updated", student_id=str(sid))
    return StudentOut.from_model(st)


@router.delete(
    "/{student_id}",
    status_code=status.HTTP_202_ACCEPTED,
    response_class=Response,
    responses={
        202: {"description": "Student is deleted"},
        400: BAD_REQUEST,
        500: INTERNAL_ERROR,
    },
)
def delete_student(
    student_id: str,
    store: StudentStore = Depends(get_student_store),  # noqa: B008
):
    """Deletes a Student. An unknown id is accepted as a no-op."""
    sid = parse_student_id(student_id)
    st = store.find_by_id(sid)
    if st is None:
        get_logger().info("student.delete.missing", student_id=str(sid))
        return Response(status_code=status.HTTP_202_ACCEPTED)

    store.remove(st)
    store.commit()

    get_logger().info("student.deleted", student_id=str(sid))
    return Response(status_code=status.HTTP_202_ACCEPTED)
