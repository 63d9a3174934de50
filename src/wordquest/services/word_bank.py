"""Static word catalog grouped by category."""
from typing import Dict, List, Optional

from wordquest.models.catalog_models import Category, CategoryInfo, WordEntry, normalize_token

CATEGORIES: Dict[Category, CategoryInfo] = {
    Category.MAGIC_E: CategoryInfo(name="Magic E", emoji="✨"),
    Category.CLOTHING: CategoryInfo(name="בגדים וצבעים", emoji="👕"),
    Category.NUMBERS: CategoryInfo(name="מחירים", emoji="💰"),
    Category.HOUSE: CategoryInfo(name="בית ומילים כלליות", emoji="🏠"),
}

CURRENCY_TOKEN = "dollar"

WORD_BANK: List[WordEntry] = [
    # Magic E
    WordEntry("bake", "לאפות", Category.MAGIC_E, "🧁"),
    WordEntry("game", "משחק", Category.MAGIC_E, "🎮"),
    WordEntry("home", "בית", Category.MAGIC_E, "🏡"),
    WordEntry("nose", "אף", Category.MAGIC_E, "👃"),
    WordEntry("rule", "כלל", Category.MAGIC_E, "📏"),
    WordEntry("same", "אותו דבר", Category.MAGIC_E, "🟰"),
    WordEntry("size", "גודל", Category.MAGIC_E, "📐"),
    WordEntry("wake up", "להתעורר", Category.MAGIC_E, "⏰"),

    # Clothing
    WordEntry("boots", "מגפיים", Category.CLOTHING, "🥾"),
    WordEntry("clothes", "בגדים", Category.CLOTHING, "👔"),
    WordEntry("coat", "מעיל", Category.CLOTHING, "🧥"),
    WordEntry("dress", "שמלה", Category.CLOTHING, "👗"),
    WordEntry("pants", "מכנסיים", Category.CLOTHING, "👖"),
    WordEntry("shirt", "חולצה", Category.CLOTHING, "👕"),
    WordEntry("shoes", "נעליים", Category.CLOTHING, "👟"),
    WordEntry("skirt", "חצאית", Category.CLOTHING, "🩳"),
    WordEntry("socks", "גרביים", Category.CLOTHING, "🧦"),
    WordEntry("sweater", "סוודר", Category.CLOTHING, "🧶"),

    # Numbers (prices)
    WordEntry("thirty", "30", Category.NUMBERS, "3️⃣"),
    WordEntry("forty", "40", Category.NUMBERS, "4️⃣"),
    WordEntry("fifty", "50", Category.NUMBERS, "5️⃣"),
    WordEntry("sixty", "60", Category.NUMBERS, "6️⃣"),
    WordEntry("seventy", "70", Category.NUMBERS, "7️⃣"),
    WordEntry("eighty", "80", Category.NUMBERS, "8️⃣"),
    WordEntry("ninety", "90", Category.NUMBERS, "9️⃣"),
    WordEntry("hundred", "100", Category.NUMBERS, "💯"),
    WordEntry(CURRENCY_TOKEN, "דולר", Category.NUMBERS, "💵"),

    # House and general words
    WordEntry("bathroom", "חדר אמבטיה", Category.HOUSE, "🛁"),
    WordEntry("bedroom", "חדר שינה", Category.HOUSE, "🛏️"),
    WordEntry("living room", "סלון", Category.HOUSE, "🛋️"),
    WordEntry("kitchen", "מטבח", Category.HOUSE, "🍳"),
    WordEntry("room", "חדר", Category.HOUSE, "🚪"),
    WordEntry("mirror", "מראה", Category.HOUSE, "🪞"),
    WordEntry("store", "חנות", Category.HOUSE, "🏪"),
    WordEntry("online", "אונליין", Category.HOUSE, "🌐"),
    WordEntry("clean", "נקי", Category.HOUSE, "🧼"),
    WordEntry("close", "לסגור", Category.HOUSE, "🚫"),
    WordEntry("cold", "קר", Category.HOUSE, "🥶"),
    WordEntry("long", "ארוך", Category.HOUSE, "📏"),
    WordEntry("new", "חדש", Category.HOUSE, "🆕"),
    WordEntry("old", "ישן", Category.HOUSE, "🏚️"),
    WordEntry("warm", "חם", Category.HOUSE, "🔥"),
    WordEntry("wear", "ללבוש", Category.HOUSE, "👗"),
    WordEntry("write", "לכתוב", Category.HOUSE, "✏️"),
    WordEntry("door", "דלת", Category.HOUSE, "🚪"),
    WordEntry("face", "פנים", Category.HOUSE, "😊"),
    WordEntry("flute", "חליל", Category.HOUSE, "🎵"),
    WordEntry("late", "מאוחר", Category.HOUSE, "⌛"),
    WordEntry("more", "יותר", Category.HOUSE, "➕"),
    WordEntry("smile", "חיוך", Category.HOUSE, "😁"),
    WordEntry("think", "לחשוב", Category.HOUSE, "🤔"),
]

_BY_KEY: Dict[str, WordEntry] = {entry.key: entry for entry in WORD_BANK}


def all_words() -> List[WordEntry]:
    """Get every catalog entry."""
    return list(WORD_BANK)


def all_tokens() -> List[str]:
    """Get every catalog token in catalog order."""
    return [entry.token for entry in WORD_BANK]


def by_category(category: Category) -> List[WordEntry]:
    """Get the entries of one category."""
    return [entry for entry in WORD_BANK if entry.category == category]


def find_word(token: str) -> Optional[WordEntry]:
    """Find an entry by token, ignoring case."""
    return _BY_KEY.get(normalize_token(token))


def category_info(category: Category) -> CategoryInfo:
    return CATEGORIES[category]


def magic_e_words() -> List[WordEntry]:
    return by_category(Category.MAGIC_E)


def clothing_words() -> List[WordEntry]:
    return by_category(Category.CLOTHING)


def number_words() -> List[WordEntry]:
    """Get the number words; the currency word is not a number."""
    return [entry for entry in by_category(Category.NUMBERS) if entry.token != CURRENCY_TOKEN]


def house_words() -> List[WordEntry]:
    return by_category(Category.HOUSE)
