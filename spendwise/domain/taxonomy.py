"""Closed category and currency taxonomies.

Keyword tables are immutable module constants. Iteration order of the
category tables is the tie-break order used by the classifiers, so every
table is keyed in ``CATEGORIES`` order.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

FOOD = "Food"
TRANSPORTATION = "Transportation"
SHOPPING = "Shopping"
ENTERTAINMENT = "Entertainment"
HEALTHCARE = "Healthcare"
UTILITIES = "Utilities"
HOUSING = "Housing"
OTHER = "Other"

# Classifier iteration (and tie-break) order
CATEGORIES: tuple[str, ...] = (
    FOOD,
    TRANSPORTATION,
    SHOPPING,
    ENTERTAINMENT,
    HEALTHCARE,
    UTILITIES,
    HOUSING,
)

ALL_CATEGORIES: frozenset[str] = frozenset(CATEGORIES + (OTHER,))

KeywordTable = Mapping[str, tuple[str, ...]]

CURRENCY_ALIASES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "RON": ("ron", "lei", "leu"),
        "EUR": ("eur", "euro", "euros", "€"),
        "USD": ("usd", "dollar", "dollars", "$"),
        "GBP": ("gbp", "pound", "pounds", "£"),
    }
)

CURRENCY_CODES: tuple[str, ...] = tuple(CURRENCY_ALIASES)

# Keywords for short chat messages ("I bought groceries from Auchan for 200 lei").
CHAT_CATEGORY_KEYWORDS: KeywordTable = MappingProxyType(
    {
        FOOD: (
            "food", "eat", "restaurant", "cafe", "coffee", "lunch", "dinner", "breakfast",
            "grocery", "groceries", "supermarket", "market", "auchan", "carrefour", "lidl",
            "mcdonalds", "kfc", "pizza", "burger", "meal", "snack", "drink", "beverages",
        ),
        TRANSPORTATION: (
            "gas", "fuel", "petrol", "diesel", "transport", "bus", "taxi", "uber", "lyft",
            "train", "metro", "parking", "car", "vehicle", "station", "ticket", "fare",
        ),
        SHOPPING: (
            "shopping", "clothes", "clothing", "shoes", "electronics", "phone", "laptop",
            "amazon", "online", "store", "mall", "purchase", "buy", "bought",
        ),
        ENTERTAINMENT: (
            "movie", "cinema", "theater", "concert", "game", "entertainment", "fun",
            "park", "museum", "ticket", "show", "event",
        ),
        HEALTHCARE: (
            "pharmacy", "medicine", "doctor", "hospital", "health", "medical", "clinic",
            "prescription", "drugs", "treatment",
        ),
        UTILITIES: (
            "bill", "electricity", "water", "internet", "phone", "utility", "subscription",
            "netflix", "spotify", "service",
        ),
        HOUSING: (
            "rent", "mortgage", "housing", "home", "apartment", "furniture", "repair",
            "maintenance", "cleaning",
        ),
    }
)

# Merchant and store-brand tokens seen on Romanian receipts.
RECEIPT_CATEGORY_KEYWORDS: KeywordTable = MappingProxyType(
    {
        FOOD: (
            # Supermarket chains
            "kaufland", "carrefour", "auchan", "mega image", "profi", "penny", "lidl",
            "selgros", "metro", "cora", "real", "hypermarket", "supermarket",
            "alimentara", "piata", "magazin alimentar",
            # Restaurants and fast food
            "restaurant", "cafe", "cafea", "cofetarie", "brutarie", "patiserie",
            "pizza", "burger", "kfc", "mcdonald", "subway", "doner", "shaorma",
            "food", "mancare", "bautura", "lapte", "paine", "carne", "legume",
            "milk", "bread", "meat", "vegetables", "fruit", "cheese",
        ),
        TRANSPORTATION: (
            # Fuel stations
            "petrom", "rompetrol", "omv", "mol", "lukoil", "shell", "bp", "esso",
            "benzina", "motorina", "combustibil", "carburant", "fuel",
            "parcare", "parking", "uber", "bolt", "taxi", "transport",
            "autobuz", "metrou", "stb", "ratb", "bilet", "abonament",
            "cfr", "tarom", "train", "airplane", "bus",
        ),
        SHOPPING: (
            "emag", "altex", "flanco", "media galaxy", "pc garage",
            "dedeman", "leroy merlin", "ikea", "jysk", "praktiker",
            "mall", "shopping", "magazin", "store",
            "haine", "imbracaminte", "pantofi", "shoes", "clothing",
            "electronice", "electronics", "mobila", "furniture",
        ),
        ENTERTAINMENT: (
            "cinema", "cinematograf", "movie", "bilet", "ticket", "concert",
            "teatru", "theater", "opera", "muzeu", "museum", "parc", "park",
            "distractii", "entertainment", "jocuri", "games", "bowling",
            "karaoke", "netflix", "hbo", "spotify", "subscription",
        ),
        HEALTHCARE: (
            "farmacie", "farmacy", "catena", "help net", "dona", "sensiblu", "farmacia tei",
            "spital", "hospital", "clinica", "clinic", "medic", "doctor",
            "dentist", "medicament", "medicine", "reteta", "prescription",
            "consultatii", "consultation", "analize", "radiografie",
        ),
        UTILITIES: (
            "enel", "electrica", "e-on", "gdf suez", "engie", "distrigaz",
            "apa", "water", "nova", "rcs", "rds", "orange", "vodafone",
            "telekom", "digi", "upc", "internet", "telefon", "phone",
            "curent", "electricity", "gaz", "gas", "factura", "bill",
        ),
        HOUSING: (
            "chirie", "intretinere", "asociatia de proprietari", "rent",
            "renovare", "apartament", "imobiliare",
        ),
    }
)


def normalize_category(value: str | None) -> str:
    """Map a free-form category label onto the closed taxonomy ("Other" if unknown)."""
    if not value:
        return OTHER
    wanted = value.strip().lower()
    for category in ALL_CATEGORIES:
        if category.lower() == wanted:
            return category
    return OTHER


def normalize_currency(value: str | None) -> str | None:
    """Map a currency code or alias onto a canonical code, or None if unknown."""
    if not value:
        return None
    wanted = value.strip().lower()
    for code, aliases in CURRENCY_ALIASES.items():
        if wanted == code.lower() or wanted in aliases:
            return code
    return None


def merge_keyword_tables(base: KeywordTable, extra: Mapping[str, tuple[str, ...]]) -> KeywordTable:
    """Append extra keywords to a base table, keeping taxonomy order and dropping duplicates."""
    merged: dict[str, tuple[str, ...]] = {}
    for category in CATEGORIES:
        keywords = list(base.get(category, ()))
        for keyword in extra.get(category, ()):
            if keyword not in keywords:
                keywords.append(keyword)
        merged[category] = tuple(keywords)
    return MappingProxyType(merged)
