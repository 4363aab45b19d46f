import re
from typing import Iterable, List

# Kata umum bahasa Persia yang tidak dipakai untuk pencocokan
STOP_WORDS = frozenset([
    'از', 'به', 'با', 'در', 'که', 'و', 'را', 'برای', 'یک', 'است', 'هست', 'بود',
    'شد', 'شود', 'کنم', 'کنید', 'باشد', 'باشند', 'چه', 'چطور', 'چگونه', 'آیا',
    'کیست', 'چیست', 'من',
])

# Titik, koma, tanda tanya Latin dan Persia
PUNCTUATION_PATTERN = re.compile(r"[.,؟?]")

def extract_keywords(text: str) -> List[str]:
    """
    Ambil kata kunci unik dari teks.

    Hasilnya secara makna adalah himpunan, tetapi urutannya mengikuti
    kemunculan pertama agar frasa yang disusun ulang selalu sama.
    """
    words = PUNCTUATION_PATTERN.sub(" ", text).split()
    keywords = {}
    for word in words:
        if len(word) > 1 and word not in STOP_WORDS:
            keywords.setdefault(word, None)
    return list(keywords)

def keyword_phrase(keywords: Iterable[str]) -> str:
    return " ".join(keywords)
