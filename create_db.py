# create_db.py
# Creates the users and skills tables if they are missing. Safe to re-run.
import logging

from career_advisor import create_app

logging.basicConfig(level=logging.INFO)

app = create_app()
print("✅ Database schema is ready")
