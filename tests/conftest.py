import copy
from pathlib import Path

import pytest

from service import JsonSalonRepository

DATA_FILE = Path(__file__).resolve().parent.parent / "data" / "salon.json"

SAMPLE_DATA = {
    "shop_defaults": {
        "shop_id": "shop_01",
        "default_nomination_fee": 1000,
        "default_confirmed_nomination_fee": 500,
        "default_princess_reservation_fee": 3000,
    },
    "courses": [
        {"id": "course_60", "name": "Standard 60", "duration_minutes": 60, "base_price": 6000},
        {"id": "course_90", "name": "Standard 90", "duration_minutes": 90, "base_price": 9000},
    ],
    "options": [
        {"id": "opt_head", "name": "Head spa", "duration_minutes": 30, "price": 3000},
        {"id": "opt_aroma", "name": "Aroma oil", "duration_minutes": 0, "price": 1000},
    ],
    "therapist_pricing": [
        {"therapist_id": "th_01", "nomination_fee": 1500, "confirmed_nomination_fee": 0,
         "princess_reservation_fee": 4000},
    ],
    "shifts": [
        {"id": "sh_01", "resource_id": "th_01", "date": "2025-01-15", "start_time": "18:00", "end_time": "26:00"},
        {"id": "sh_02", "resource_id": "th_02", "date": "2025-01-15", "start_time": "12:00:00", "end_time": "20:00:00"},
    ],
    "reservations": [
        {"id": "rsv_01", "customer_id": "cu_01", "therapist_id": "th_01", "date": "2025-01-15",
         "start_time": "22:00", "course_id": "course_60", "option_ids": ["opt_head"],
         "designation": "nomination", "status": "confirmed"},
        {"id": "rsv_02", "customer_id": "cu_02", "therapist_id": "th_01", "date": "2025-01-15",
         "start_time": "23:00", "course_id": "course_90", "status": "pending"},
        {"id": "rsv_03", "customer_id": "cu_01", "therapist_id": "th_02", "date": "2025-01-15",
         "start_time": "13:00", "course_id": "course_60", "status": "completed"},
        {"id": "rsv_04", "customer_id": "cu_03", "therapist_id": "th_02", "date": "2025-01-15",
         "start_time": "13:30", "course_id": "course_60", "status": "cancelled"},
    ],
}


@pytest.fixture
def sample_data():
    return copy.deepcopy(SAMPLE_DATA)


@pytest.fixture
def repo(sample_data):
    return JsonSalonRepository.from_dict(sample_data)
