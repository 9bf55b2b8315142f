# app/messages/log_messages.py

# ✅ Positive
LOGS_FETCHED = "Logs retrieved successfully."
LOG_CREATED = "Log created successfully."
STATS_FETCHED = "Statistics retrieved successfully."

# ❌ Errors
MESSAGE_AND_TYPE_REQUIRED = "Message and type are required."
INVALID_LOG_TYPE = "Log type must be one of: info, success, warning, error, debug."
LOGS_FETCH_FAILED = "Failed to fetch logs."
LOG_CREATE_FAILED = "Failed to create log."
STATS_FETCH_FAILED = "Failed to fetch statistics."
