"""
User Service - lookups, registration and credential checks for the 'users' table.
"""
import logging
from typing import Any, Dict, Mapping, Optional, Union

from passlib.context import CryptContext
from sqlalchemy.orm import Session

from database import execute, fetch_one
from schemas import UserCreate, parse_input

logger = logging.getLogger(__name__)

# Bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
     return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
     try:
          return pwd_context.verify(password, hashed)
     except ValueError:
          # Stored value is not a recognised hash (e.g. legacy seed rows)
          return False


def get_user_with_email(db: Session, email: str) -> Optional[Dict[str, Any]]:
     """
     Get a single user given their email.

     Returns:
          The user row, or None if no user has that email
     """
     return fetch_one(
          db,
          "SELECT * FROM users WHERE email = $1",
          [email],
          operation="get_user_with_email",
     )


def get_user_with_id(db: Session, user_id: int) -> Optional[Dict[str, Any]]:
     """
     Get a single user given their id.

     Returns:
          The user row, or None if the id is unknown
     """
     return fetch_one(
          db,
          "SELECT * FROM users WHERE id = $1",
          [user_id],
          operation="get_user_with_id",
     )


def add_user(db: Session, user: Union[UserCreate, Mapping[str, Any]]) -> Dict[str, Any]:
     """
     Add a new user. The plain-text password is stored as a bcrypt hash.

     Returns:
          The inserted row

     Raises:
          ConstraintViolationError: If the email is already registered
     """
     user = parse_input(UserCreate, user)
     row = execute(
          db,
          "INSERT INTO users (name, email, password) VALUES ($1, $2, $3) RETURNING *",
          [user.name, user.email, hash_password(user.password)],
          operation="add_user",
     ).mappings().first()
     logger.info("Registered user %s", row["id"])
     return dict(row)


def authenticate_user(db: Session, email: str, password: str) -> Optional[Dict[str, Any]]:
     """
     Look up a user by email and check their password.

     Returns:
          The user row when the credentials match, otherwise None
     """
     user = get_user_with_email(db, email)
     if user is None or not verify_password(password, user["password"]):
          return None
     return user
