"""
Table definitions of the hotel booking schema.

The production schema lives in the external database; these definitions
create the same tables for development databases and tests. Identifiers
are lowercase so that PostgreSQL sequence names come out as
``<table>_<column>_seq`` (for example ``users_userid_seq``).
"""
from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    ForeignKeyConstraint,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    UniqueConstraint,
)

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("userid", Integer, primary_key=True),
    Column("name", String(50), nullable=False),
    Column("password", String(128), nullable=False),
    Column("usertype", String(10), nullable=False, server_default="Customer"),
    sqlite_autoincrement=True,
)

hotel = Table(
    "hotel",
    metadata,
    Column("hotelid", Integer, primary_key=True),
    Column("hotelname", String(50), nullable=False),
    Column("latitude", Float, nullable=False),
    Column("longitude", Float, nullable=False),
    Column("dateestablished", Date),
    Column("manageruserid", Integer, ForeignKey("users.userid")),
    sqlite_autoincrement=True,
)

rooms = Table(
    "rooms",
    metadata,
    Column("hotelid", Integer, ForeignKey("hotel.hotelid"), primary_key=True),
    Column("roomnumber", Integer, primary_key=True),
    Column("price", Numeric(10, 2), nullable=False),
    Column("imageurl", String(400)),
)

maintenance_company = Table(
    "maintenancecompany",
    metadata,
    Column("companyid", Integer, primary_key=True),
    Column("name", String(50), nullable=False),
    Column("address", String(200)),
    Column("iscertified", Boolean, nullable=False, server_default="0"),
    sqlite_autoincrement=True,
)

room_bookings = Table(
    "roombookings",
    metadata,
    Column("bookingid", Integer, primary_key=True),
    Column("customerid", Integer, ForeignKey("users.userid"), nullable=False),
    Column("hotelid", Integer, nullable=False),
    Column("roomnumber", Integer, nullable=False),
    Column("bookingdate", Date, nullable=False),
    ForeignKeyConstraint(["hotelid", "roomnumber"], ["rooms.hotelid", "rooms.roomnumber"]),
    # At most one booking per room and night.
    UniqueConstraint("hotelid", "roomnumber", "bookingdate", name="uq_roombookings_slot"),
    sqlite_autoincrement=True,
)

room_updates_log = Table(
    "roomupdateslog",
    metadata,
    Column("updatenumber", Integer, primary_key=True),
    Column("managerid", Integer, ForeignKey("users.userid"), nullable=False),
    Column("hotelid", Integer, nullable=False),
    Column("roomnumber", Integer, nullable=False),
    Column("updatedon", DateTime, nullable=False),
    ForeignKeyConstraint(["hotelid", "roomnumber"], ["rooms.hotelid", "rooms.roomnumber"]),
    sqlite_autoincrement=True,
)

room_repairs = Table(
    "roomrepairs",
    metadata,
    Column("repairid", Integer, primary_key=True),
    Column("companyid", Integer, ForeignKey("maintenancecompany.companyid"), nullable=False),
    Column("hotelid", Integer, nullable=False),
    Column("roomnumber", Integer, nullable=False),
    Column("repairdate", Date, nullable=False),
    ForeignKeyConstraint(["hotelid", "roomnumber"], ["rooms.hotelid", "rooms.roomnumber"]),
    sqlite_autoincrement=True,
)

room_repair_requests = Table(
    "roomrepairrequests",
    metadata,
    Column("requestnumber", Integer, primary_key=True),
    Column("managerid", Integer, ForeignKey("users.userid"), nullable=False),
    Column("repairid", Integer, ForeignKey("roomrepairs.repairid"), nullable=False),
    sqlite_autoincrement=True,
)
