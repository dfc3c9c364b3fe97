# Garante o registro de TODAS as models no mesmo registry
from student_api.db.base_class import Base  # noqa
from student_api.models.student import Student  # noqa
