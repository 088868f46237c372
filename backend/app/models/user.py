from sqlalchemy import Column, Integer, String, Date, DateTime, CheckConstraint, Index, text
from sqlalchemy.sql import func
from app.database import Base


class User(Base):
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(100))
    last_name = Column(String(100))
    date_of_birth = Column(Date)
    gender = Column(String(20))
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
    # NULL means active
    deleted_at = Column(DateTime, nullable=True)

    __table_args__ = (
        CheckConstraint(
            "gender IS NULL OR gender IN ('Male', 'Female', 'Other', 'Prefer not to say')",
            name="ck_users_gender",
        ),
        Index("idx_users_email", "email"),
        Index("idx_users_active", "user_id", postgresql_where=text("deleted_at IS NULL")),
    )
