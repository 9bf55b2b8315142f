# app/messages/sector_messages.py

# ✅ Positive
SECTORS_FETCHED = "Sectors retrieved successfully."
DASHBOARD_FETCHED = "Dashboard data retrieved successfully."

# ❌ Errors
SECTOR_NOT_FOUND = "Sector not found."
SECTORS_FETCH_FAILED = "Failed to fetch sectors."
DASHBOARD_FETCH_FAILED = "Failed to fetch dashboard data."
