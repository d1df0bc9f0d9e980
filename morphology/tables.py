"""
morphology/tables.py

Immutable English lookup tables.

Everything here is built once at import time and exposed read-only:
sets are `frozenset`, maps are `MappingProxyType` views over module-private
dicts. The tables are shared by every engine in the process and are safe
for unsynchronized concurrent reads.

Per-engine overrides (custom nouns, verbs, adjectives, article rules) live
on the engine itself and are layered on top of these tables; the tables
are never mutated.

Sections:

1. Nouns (irregular, unchanged, herd, classical, -f/-fe, -o)
2. Adjectives and adverbs
3. Number agreement for verbs and determiners
4. Article heuristics
5. Possessive heuristics
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping


def _frozen(table: Dict[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(table))


def reverse_map(table: Mapping[str, str]) -> Dict[str, str]:
    """Build a plural -> singular dict from a singular -> plural mapping."""
    return {plural: singular for singular, plural in table.items()}


# ---------------------------------------------------------------------------
# 1. Nouns
# ---------------------------------------------------------------------------

# Built-in irregular plurals. Each engine copies this at construction time
# and derives its own reverse (plural -> singular) map from the copy.
DEFAULT_IRREGULAR_PLURALS: Mapping[str, str] = _frozen(
    {
        # Germanic survivals
        "child": "children",
        "foot": "feet",
        "goose": "geese",
        "louse": "lice",
        "man": "men",
        "mouse": "mice",
        "ox": "oxen",
        "person": "people",
        "tooth": "teeth",
        "woman": "women",
        "die": "dice",
        # Greek -on -> -a
        "criterion": "criteria",
        "phenomenon": "phenomena",
        # Greek -is -> -es
        "analysis": "analyses",
        "basis": "bases",
        "crisis": "crises",
        "diagnosis": "diagnoses",
        "hypothesis": "hypotheses",
        "oasis": "oases",
        "parenthesis": "parentheses",
        "synopsis": "synopses",
        "thesis": "theses",
        # Latin -us -> -i
        "alumnus": "alumni",
        "cactus": "cacti",
        "focus": "foci",
        "fungus": "fungi",
        "nucleus": "nuclei",
        "radius": "radii",
        "stimulus": "stimuli",
        "syllabus": "syllabi",
        # Latin -um -> -a
        "bacterium": "bacteria",
        "curriculum": "curricula",
        "datum": "data",
        "medium": "media",
        "memorandum": "memoranda",
        "millennium": "millennia",
        "stadium": "stadia",
        "stratum": "strata",
        # Latin -ex/-ix -> -ices
        "appendix": "appendices",
        "index": "indices",
        "matrix": "matrices",
        "vertex": "vertices",
        "apex": "apices",
    }
)

# Nouns whose plural is identical to the singular.
UNCHANGED_PLURALS = frozenset(
    {
        "aircraft", "cod", "deer", "fish", "moose", "offspring", "pike",
        "salmon", "series", "sheep", "shrimp", "species", "squid", "swine",
        "trout", "tuna",
    }
)

# Animals that are unchanged only in classical herd mode ("a herd of bison")
# and take a regular plural otherwise ("bisons").
HERD_ANIMALS = frozenset(
    {"bison", "buffalo", "caribou", "elk", "grouse", "antelope", "wildebeest"}
)

# Latin/Greek plurals used only while classical mode is on.
CLASSICAL_PLURALS: Mapping[str, str] = _frozen(
    {
        # -a -> -ae
        "formula": "formulae",
        "antenna": "antennae",
        "vertebra": "vertebrae",
        "alumna": "alumnae",
        "larva": "larvae",
        "nebula": "nebulae",
        "aurora": "aurorae",
        "alga": "algae",
        "amoeba": "amoebae",
        "minutia": "minutiae",
        "lacuna": "lacunae",
        "persona": "personae",
        "vita": "vitae",
        "cornea": "corneae",
        "retina": "retinae",
        "hernia": "herniae",
        "nausea": "nauseae",
        "arena": "arenae",
        "zona": "zonae",
        "lamina": "laminae",
        "nova": "novae",
        "supernova": "supernovae",
        # Greek -pus -> -podes
        "octopus": "octopodes",
        "platypus": "platypodes",
        # Other classical forms
        "hippopotamus": "hippopotami",
        "opus": "opera",
        "corpus": "corpora",
        "genus": "genera",
        "viscus": "viscera",
    }
)

# -man nouns that are not compounds of "man" and just take -s (talismans).
MAN_TAKES_S = frozenset(
    {
        "ataman", "caiman", "cayman", "desman", "dolman", "german", "norman",
        "ottoman", "roman", "shaman", "talisman", "walkman",
    }
)

# -f / -fe nouns that become -ves. Everything else just takes -s (roof -> roofs).
CHANGE_TO_VES = frozenset(
    {
        "calf", "elf", "half", "knife", "leaf", "life", "loaf", "self",
        "sheaf", "shelf", "thief", "wife", "wolf",
    }
)

# Consonant + o nouns that take plain -s instead of -es.
O_TAKES_S = frozenset(
    {
        "alto", "auto", "basso", "canto", "casino", "combo", "contralto",
        "disco", "dynamo", "embryo", "espresso", "euro", "fiasco", "ghetto",
        "inferno", "kilo", "limo", "maestro", "memo", "metro", "piano",
        "photo", "pimento", "polo", "poncho", "pro", "ratio", "rhino", "silo",
        "solo", "soprano", "stiletto", "studio", "taco", "tattoo", "tempo",
        "tornado", "torso", "tuxedo", "video", "virtuoso", "zero", "albino",
        "archipelago", "armadillo", "commando", "dodo", "flamingo", "grotto",
        "magneto", "manifesto", "mosquito", "motto", "otto", "placebo",
        "portfolio", "quarto", "stucco", "tobacco", "volcano",
    }
)

# Nationality and collective suffixes that never change (Chinese, Iroquois).
UNCHANGED_SUFFIXES = ("ese", "ois")


# ---------------------------------------------------------------------------
# 2. Adjectives and adverbs
# ---------------------------------------------------------------------------

IRREGULAR_COMPARATIVES: Mapping[str, str] = _frozen(
    {
        "good": "better",
        "well": "better",
        "bad": "worse",
        "ill": "worse",
        "far": "farther",
        "little": "less",
        "much": "more",
        "many": "more",
    }
)

IRREGULAR_SUPERLATIVES: Mapping[str, str] = _frozen(
    {
        "good": "best",
        "well": "best",
        "bad": "worst",
        "ill": "worst",
        "far": "farthest",
        "little": "least",
        "much": "most",
        "many": "most",
    }
)

# Two-syllable adjectives that still take -er/-est.
TWO_SYLLABLE_WITH_SUFFIX = frozenset(
    {
        "simple", "gentle", "narrow", "shallow", "quiet", "clever", "common",
        "hollow", "mellow", "yellow", "feeble", "humble", "noble", "able",
        "tender", "bitter", "slender",
    }
)

IRREGULAR_ADVERBS: Mapping[str, str] = _frozen(
    {
        "good": "well",
        "whole": "wholly",
        "day": "daily",
        "gay": "gaily",
    }
)

# Flat adverbs and words that are already adverbs.
UNCHANGED_ADVERBS = frozenset(
    {
        "fast", "hard", "late", "early", "straight", "well", "ill", "just",
        "only", "still", "much", "far", "long", "likely", "even", "ahead",
        "away", "alone", "aloud", "apart", "abroad", "afoot", "afloat",
        "ashore", "asleep", "awake", "alive", "askew", "awry",
    }
)

# -le adjectives that keep the e (sole -> solely, not "soly").
LE_KEEPS_E = frozenset({"sole"})

# Short consonant + y adjectives that keep the y (shy -> shyly).
SHORT_Y_ADVERBS = frozenset({"shy", "sly", "dry", "wry", "coy", "spry"})


# ---------------------------------------------------------------------------
# 3. Number agreement: verbs and determiners
# ---------------------------------------------------------------------------

VERB_SINGULAR_TO_PLURAL: Mapping[str, str] = _frozen(
    {
        "is": "are",
        "was": "were",
        "has": "have",
        "does": "do",
        "goes": "go",
        "isn't": "aren't",
        "wasn't": "weren't",
        "hasn't": "haven't",
        "doesn't": "don't",
    }
)

VERB_PLURAL_TO_SINGULAR: Mapping[str, str] = _frozen(
    reverse_map(VERB_SINGULAR_TO_PLURAL)
)

# Modals have no number distinction.
VERB_UNCHANGED = frozenset(
    {
        "can", "could", "may", "might", "must", "shall", "should", "will",
        "would", "can't", "won't", "shan't", "mustn't",
    }
)

ADJ_SINGULAR_TO_PLURAL: Mapping[str, str] = _frozen(
    {
        "this": "these",
        "that": "those",
        "a": "some",
        "an": "some",
        "my": "our",
        "your": "your",
        "her": "their",
        "his": "their",
        "its": "their",
    }
)

ADJ_PLURAL_TO_SINGULAR: Mapping[str, str] = _frozen(
    {
        "these": "this",
        "those": "that",
        "some": "a",
        "our": "my",
    }
)

# "their" depends on the engine gender (m/f/n/t).
ADJ_PLURAL_TO_SINGULAR_BY_GENDER: Mapping[str, Mapping[str, str]] = _frozen(
    {
        "their": _frozen({"m": "his", "f": "her", "n": "its", "t": "their"}),
    }
)


# ---------------------------------------------------------------------------
# 4. Article heuristics
# ---------------------------------------------------------------------------

# Words starting with a silent h; matched as prefixes (hour -> hourglass).
SILENT_H_WORDS = (
    "honest", "heir", "heiress", "heirloom", "honor", "honour", "hour", "hourly",
)

# Lowercase tokens that are read letter by letter.
LOWERCASE_ABBREVIATIONS = frozenset(
    {"mpeg", "jpeg", "gif", "sql", "html", "xml", "fbi", "cia", "nsa"}
)

# Letters whose spoken name starts with a vowel sound (an "F", an "X-ray").
VOWEL_SOUND_LETTERS = frozenset("AEFHILMNORSX")

# Vowel-letter prefixes that are pronounced with a consonant ("a unicorn",
# "a euro", "a one-off").
CONSONANT_SOUND_PREFIXES = (
    "uni", "upon", "use", "used", "user", "using", "usual", "usu", "uran",
    "uret", "euro", "ewe", "onc", "one", "onet",
)

# u + consonant + vowel openings pronounced "you-" ("a urinal", "a unanimous").
YOU_SOUND_PREFIXES = frozenset(
    {
        "uga", "ukr", "ula", "ule", "uli", "ulo", "ulu",
        "una", "uni", "uno", "unu", "ura", "ure", "uri", "uro", "uru",
        "usa", "use", "usi", "uso", "usu",
        "uta", "ute", "uti", "uto", "utu",
    }
)


# ---------------------------------------------------------------------------
# 5. Possessive heuristics
# ---------------------------------------------------------------------------

# Irregular plurals that do not end in s (children's, people's).
IRREGULAR_PLURALS_WITHOUT_S = frozenset(
    {
        "children", "men", "women", "people", "mice", "geese", "feet",
        "teeth", "oxen", "lice", "dice",
    }
)

# Singular nouns that end in s and must not be mistaken for plurals.
SINGULARS_ENDING_IN_S = frozenset(
    {
        "bus", "gas", "lens", "atlas", "iris", "plus", "minus", "virus",
        "bonus", "focus", "campus", "census", "corpus", "genius", "nexus",
        "oasis", "basis", "thesis", "crisis", "analysis", "diagnosis",
        "hypothesis", "parenthesis", "synopsis", "emphasis", "cosmos",
        "chaos", "ethos", "pathos", "logos", "status", "apparatus", "hiatus",
        "impetus", "radius", "nucleus", "syllabus", "stimulus", "fungus",
        "cactus", "octopus", "platypus", "walrus", "yes", "no", "us", "this",
        "thus", "circus", "chorus", "canvas", "alias", "bias", "surplus",
        "sinus", "fetus", "prospectus", "thesaurus",
    }
)

# Nouns ending in -oe; their plurals take a plain -s (shoe -> shoes).
OE_NOUNS = frozenset(
    {
        "shoe", "toe", "foe", "hoe", "oboe", "canoe", "floe", "sloe", "throe",
        "tiptoe", "woe", "roe", "doe",
    }
)

# Nouns ending in -ie; their plurals are not -y words (movies -> movie).
IE_NOUNS = frozenset(
    {
        "movie", "cookie", "pie", "tie", "lie", "zombie", "calorie", "rookie",
        "brownie", "hippie", "goalie", "prairie", "genie", "sortie", "auntie",
        "smoothie", "selfie", "hoodie", "newbie", "freebie", "birdie",
        "collie", "magpie", "necktie", "lingerie", "cowrie", "eyrie",
    }
)

# Common nouns that identify a capitalized "-s" word as a real plural
# ("Cats" at the start of a sentence) rather than a name ("James").
COMMON_NOUNS = frozenset(
    {
        "cat", "dog", "book", "car", "house", "boy", "girl", "man", "woman",
        "child", "tree", "bird", "fish", "day", "night", "hand", "foot",
        "head", "eye", "ear", "door", "window", "table", "chair", "bed",
        "teacher", "student", "parent", "friend", "city", "country", "state",
        "street", "box", "bag", "ball", "cup", "glass", "paper", "pen", "key",
        "phone", "computer",
    }
)

# Stems left behind by stripping the s of a first name (James -> "jame").
TRUNCATED_NAMES = frozenset(
    {
        "jame", "charle", "jone", "mose", "jesu", "thoma", "jess", "ross",
        "walle", "jule", "mile", "gile", "style", "kyle", "achille",
        "william", "adam", "lewi", "davi", "elli", "harri", "morri", "denni",
        "franci", "chri", "mos", "ros", "gus",
    }
)

# Short -a stems that are real nouns (sofas, visas).
SHORT_A_NOUNS = frozenset(
    {
        "data", "sofa", "mega", "soda", "mama", "papa", "diva", "yoga", "cola",
        "area", "idea", "lava", "toga", "tuna", "visa", "beta", "meta", "aqua",
        "aura", "era",
    }
)
