"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import Column, Date, Integer, MetaData, String, Table, Text

# Metadata object for all tables
metadata = MetaData()

# Name of the counters row that hands out report ids
REPORT_ID_COUNTER = "report_id"

# ============================================================================
# REPORTS TABLE
# ============================================================================
reports_table = Table(
    "reports",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),  # From counters, never reused
    Column("reference_id", Integer, nullable=False),
    Column("affected_service", Text, nullable=False),
    Column("date", Date, nullable=False),
    Column("summary", Text, nullable=False),
    Column("reporter", Text, nullable=False),
    Column("reporter_handle", Text, nullable=True),  # NULL = no handle, "" is kept as ""
)

# ============================================================================
# COUNTERS TABLE (id assignment)
# ============================================================================
counters_table = Table(
    "counters",
    metadata,
    Column("name", String(64), primary_key=True),
    Column("value", Integer, nullable=False),
)
