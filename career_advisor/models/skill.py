# career_advisor/models/skill.py
from career_advisor.database import db
from sqlalchemy.sql import func


class SkillSubmission(db.Model):
    __tablename__ = "skills"
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    skill = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.TIMESTAMP, server_default=func.current_timestamp())
