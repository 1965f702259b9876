"""University timetable model, scoring rules, demo data and transport shapes."""

__version__ = "0.1.0"