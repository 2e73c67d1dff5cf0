import logging
from datetime import datetime
from typing import Dict, Optional

from config.settings import PRACTICE_NAME, SUPPORT_PHONE
from office_hours.date_formats import format_check_in_time

logger = logging.getLogger(__name__)

CONFIRMATION_NOTICE = (
    "You will receive a confirmation email and SMS for your upcoming check-in time shortly. "
    "If you need to make any changes, please follow the instructions in the email."
)
FINANCIAL_POLICY_NOTICE = (
    "All patients that present with commercial insurance will be required to leave a credit card on file."
)


def _parse_slot(selected_slot: Optional[str]) -> Optional[datetime]:
    if not selected_slot:
        return None
    try:
        # '2024-01-05T09:30:00Z' 도 받도록
        return datetime.fromisoformat(selected_slot.strip().replace("Z", "+00:00"))
    except ValueError:
        logger.warning("unparsable selected slot %r", selected_slot)
        return None


def build_check_in_confirmation(selected_slot: Optional[str]) -> Dict:
    """
    예약 완료 화면에 필요한 값
    - check_in_time: 'January 5, 9:30 AM' (slot이 없거나 깨졌으면 '')
    """
    slot = _parse_slot(selected_slot)

    return {
        "title": f"Thank you for choosing {PRACTICE_NAME}",
        "description": "We look forward to helping you soon!",
        "check_in_time": format_check_in_time(slot) if slot else "",
        "confirmation_notice": CONFIRMATION_NOTICE,
        "financial_policy_notice": FINANCIAL_POLICY_NOTICE,
        "support_phone": SUPPORT_PHONE,
        "can_cancel": slot is not None,
    }
