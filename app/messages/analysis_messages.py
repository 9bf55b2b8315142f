# app/messages/analysis_messages.py

# ✅ Positive
SENTIMENT_ANALYSIS_SUCCESS = "Sentiment analysis completed successfully."

# ❌ Errors
TEXT_REQUIRED = "Text content is required."
ANALYSIS_FAILED = "Failed to analyze sentiment."
