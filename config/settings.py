import os
from dotenv import load_dotenv

load_dotenv()

# ---------- FHIR store ----------
FHIR_API_URL = os.getenv("FHIR_API_URL", "https://fhir-api.zapehr.com/r4").strip().rstrip("/")
FHIR_ACCESS_TOKEN = os.getenv("FHIR_ACCESS_TOKEN", "").strip().strip('"').strip("'")
if not FHIR_ACCESS_TOKEN:
    # 토큰 없이도 import는 되게 하고, 실제 요청은 인증 없이 나감
    pass

# 한 번에 가져오는 Location 최대 개수 (페이지네이션 없음)
LOCATION_SEARCH_COUNT = int(os.getenv("LOCATION_SEARCH_COUNT", "1000"))

# ---------- HTTP common ----------
HTTP_TIMEOUT_SEC = int(os.getenv("HTTP_TIMEOUT_SEC", "20"))

# ---------- Local time ----------
# 비어 있으면 서버 시스템 로컬 타임존 사용
LOCAL_TIME_ZONE = os.getenv("LOCAL_TIME_ZONE", "").strip()

# ---------- Practice info (check-in confirmation) ----------
PRACTICE_NAME = os.getenv("PRACTICE_NAME", "Ottehr Telemedicine")
SUPPORT_PHONE = os.getenv("SUPPORT_PHONE", "(123) 456-7890")
