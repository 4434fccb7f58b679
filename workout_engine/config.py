"""Configuration for the workout engine."""

import os

# GCP Project
PROJECT_ID = os.getenv("GCP_PROJECT_ID", "workout-engine")
REGION = os.getenv("GCP_REGION", "europe-west1")

# Firestore collections
EXERCISES_COLLECTION = "exercises"
SESSIONS_COLLECTION = "workout_sessions"
PERSONAL_RECORDS_COLLECTION = "personal_records"
MUSCLE_VOLUME_COLLECTION = "muscle_volume"

# AI generation
GENAI_MODEL = os.getenv("GENAI_MODEL", "gemini-2.5-flash")
AI_TIMEOUT_SECS = int(os.getenv("AI_TIMEOUT_SECS", "30"))
AI_TEMPERATURE = float(os.getenv("AI_TEMPERATURE", "0.7"))
AI_GENERATION_ENABLED = os.getenv("AI_GENERATION_ENABLED", "true").lower() == "true"
USE_MOCK_LLM = os.getenv("USE_MOCK_LLM", "").lower() == "true"

# Generic text-generation endpoint: POST {"prompt": ...} -> {"content": ...}
TEXT_SERVICE_URL = os.getenv("TEXT_SERVICE_URL", "")
TEXT_SERVICE_API_KEY = os.getenv("TEXT_SERVICE_API_KEY")

# Workout sizing
MINUTES_PER_EXERCISE = 8
MAX_EXERCISES = 8
COMPOUND_SHARE = 0.6

# Swap alternatives returned per request
SWAP_ALTERNATIVES_LIMIT = 10
