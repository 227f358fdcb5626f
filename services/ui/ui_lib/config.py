import os
from dotenv import load_dotenv

load_dotenv()

POLICY_API_URL = os.getenv("POLICY_API_URL", "http://localhost:8080/api/v1/query")

HTTP_TIMEOUT_S = float(os.getenv("HTTP_TIMEOUT_S", "60"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
