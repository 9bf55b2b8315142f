# app/messages/report_messages.py

# ✅ Positive
REPORT_GENERATED = "Report generated successfully."
REPORTS_FETCHED = "Reports retrieved successfully."
COMMUNITY_REPORT_CREATED = "Community report created successfully."

# ❌ Errors
SECTOR_AND_USER_REQUIRED = "Sector and user ID are required."
USER_ID_REQUIRED = "User ID is required."
LOCATION_AND_REPORT_REQUIRED = "Location and report are required."
REPORT_GENERATION_FAILED = "Failed to generate report."
REPORTS_FETCH_FAILED = "Failed to fetch reports."
COMMUNITY_REPORT_FAILED = "Failed to create report."
