# career_advisor/models/__init__.py
# Import every model module so the metadata knows both tables.
from .user import User
from .skill import SkillSubmission
