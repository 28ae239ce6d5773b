from app.db.base import Base

# Import all models here
from app.models.problem_list import ProblemListEntry

__all__ = ["Base", "ProblemListEntry"]
