"""
ORM Records
===========

SQLAlchemy table mappings for the five relations of the store.
"""
from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class UserRecord(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt hash


class CustomerRecord(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)


class MakeRecord(Base):
    __tablename__ = "makes"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), unique=True, nullable=False)


class CarRecord(Base):
    __tablename__ = "cars"

    id = Column(Integer, primary_key=True)
    make_id = Column(Integer, ForeignKey("makes.id"), nullable=False, index=True)
    model = Column(String(255), nullable=False)
    slug = Column(String(255), unique=True, nullable=False)
    price_per_day = Column(Float, nullable=False)
    units = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint("price_per_day >= 0", name="cars_price_per_day_non_negative"),
        CheckConstraint("units >= 0", name="cars_units_non_negative"),
    )


class RentalRecord(Base):
    __tablename__ = "rentals"

    id = Column(Integer, primary_key=True)
    car_id = Column(Integer, ForeignKey("cars.id"), nullable=False)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    rental_start = Column(DateTime(timezone=True), nullable=False)
    rental_end = Column(DateTime(timezone=True), nullable=True)  # null while the car is out

    __table_args__ = (
        Index("rentals_car_id_rental_end_idx", "car_id", "rental_end"),
    )
