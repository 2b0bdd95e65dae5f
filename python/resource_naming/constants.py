"""
Constants for table and column name derivation.
"""

DEFAULT_LOCALE = "en"

# Separators that mark a namespace prefix: App\Models\User, app.models.User, App::User
NAMESPACE_SEPARATORS = ("\\", "::", ".")

REFERENCE_COLUMN = "id"  # Primary key column of every referenced entity
NAME_SEPARATOR = "_"  # Joins the parts of compound column and table names

# Pluralization tables for locales without a dedicated inflection library.
# Rules are tried in order; the first pattern that matches the end of the
# word wins. Patterns are matched case-insensitively.
SPANISH_RULES = {
    "irregulars": {
        "mes": "meses",
        "país": "países",
        "régimen": "regímenes",
        "carácter": "caracteres",
        "espécimen": "especímenes",
    },
    "uncountables": [
        "lunes",
        "martes",
        "miércoles",
        "jueves",
        "viernes",
        "crisis",
        "análisis",
        "tesis",
        "virus",
    ],
    "plurals": [
        (r"z$", "ces"),  # lápiz → lápices
        (r"á([sn])$", r"a\1es"),  # compás → compases
        (r"é([sn])$", r"e\1es"),  # francés → franceses
        (r"í([sn])$", r"i\1es"),  # jardín → jardines
        (r"ó([sn])$", r"o\1es"),  # canción → canciones
        (r"ú([sn])$", r"u\1es"),  # autobús → autobuses
        (r"([aeiou]s)$", r"\1"),  # unstressed -s is invariable
        (r"([^aeiouáéíóú])$", r"\1es"),  # ciudad → ciudades
        (r"$", "s"),  # casa → casas
    ],
}

FRENCH_RULES = {
    "irregulars": {
        "monsieur": "messieurs",
        "madame": "mesdames",
        "mademoiselle": "mesdemoiselles",
        "œil": "yeux",
        "ciel": "cieux",
        "aïeul": "aïeux",
    },
    "uncountables": [],
    "plurals": [
        (r"(bijou|caillou|chou|genou|hibou|joujou|pou)$", r"\1x"),
        (r"(bleu|émeu|landau|pneu|sarrau)$", r"\1s"),
        (r"(b|cor|ém|gemm|soupir|trav|vant|vitr)ail$", r"\1aux"),
        (r"(au|eu|eau)$", r"\1x"),  # bateau → bateaux
        (r"(bal|carnaval|chacal|festival|récital|régal)$", r"\1s"),
        (r"al$", "aux"),  # cheval → chevaux
        (r"([sxz])$", r"\1"),  # prix → prix
        (r"$", "s"),
    ],
}

PORTUGUESE_RULES = {
    "irregulars": {
        "país": "países",
        "mão": "mãos",
        "cão": "cães",
        "pão": "pães",
        "alemão": "alemães",
        "capitão": "capitães",
    },
    "uncountables": ["lápis", "ônibus", "vírus", "tórax", "tênis"],
    "plurals": [
        (r"ão$", "ões"),  # canção → canções
        (r"([aeou])l$", r"\1is"),  # animal → animais
        (r"il$", "is"),  # funil → funis
        (r"m$", "ns"),  # homem → homens
        (r"([rsz])$", r"\1es"),  # mulher → mulheres
        (r"$", "s"),
    ],
}

LOCALE_RULES = {
    "es": SPANISH_RULES,
    "fr": FRENCH_RULES,
    "pt": PORTUGUESE_RULES,
}
