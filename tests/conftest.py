"""
Pytest configuration: put the repository root on sys.path and keep the
service offline-friendly (no log file, bundled sample knowledge base).
"""

import os
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("KNOWLEDGE_BASE_SOURCE", str(REPO_ROOT / "data" / "knowledge-base.csv"))


SAMPLE_CSV = "\n".join([
    '"question","answer"',
    '"چگونه رمز عبور را تغییر دهم","راهنما: https://www.aparat.com/v/xyz"',
    '"چگونه حساب کاربری بسازم","روی ثبت نام کلیک کنید"',
    '"رمز عبور را فراموش کرده ام","از لینک بازیابی استفاده کنید"',
])


@pytest.fixture
def sample_csv():
    return SAMPLE_CSV


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "knowledge-base.csv"
    path.write_bytes(SAMPLE_CSV.encode("utf-8"))
    return path
