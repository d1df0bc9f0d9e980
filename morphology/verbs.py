"""
morphology/verbs.py

English verb tense and participle formation.

All functions here are pure: they take a verb, look it up in the irregular
tables and otherwise fall back to spelling rules. Output case follows the
input ("RUN" -> "RAN", "Walk" -> "Walked").

    past_tense("walk")          -> "walked"
    past_tense("go")            -> "went"
    present_participle("run")   -> "running"
    past_participle("write")    -> "written"
    future_tense("Go")          -> "Will Go"

The engine wraps these without adding state; they live here so that the
tables and the rules can be tested without building an engine.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping

from morphology.casing import match_case, match_suffix
from morphology.phonetics import (
    count_vowels,
    is_vowel,
    should_double_consonant,
    should_double_final_consonant,
)


def _frozen(table: Dict[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(table))


# ---------------------------------------------------------------------------
# 1. Irregular tables
# ---------------------------------------------------------------------------

# Verbs whose past tense and past participle are the same form.
IRREGULAR_VERBS_SAME: Mapping[str, str] = _frozen(
    {
        "bend": "bent", "bet": "bet", "bid": "bid", "bind": "bound",
        "bleed": "bled", "breed": "bred", "bring": "brought", "build": "built",
        "burst": "burst", "buy": "bought", "catch": "caught", "cling": "clung",
        "cost": "cost", "creep": "crept", "cut": "cut", "deal": "dealt",
        "dig": "dug", "feed": "fed", "feel": "felt", "fight": "fought",
        "find": "found", "flee": "fled", "fling": "flung", "get": "got",
        "grind": "ground", "hang": "hung", "have": "had", "hear": "heard",
        "hit": "hit", "hold": "held", "hurt": "hurt", "keep": "kept",
        "kneel": "knelt", "lay": "laid", "lead": "led", "leave": "left",
        "lend": "lent", "let": "let", "light": "lit", "lose": "lost",
        "make": "made", "mean": "meant", "meet": "met", "pay": "paid",
        "put": "put", "quit": "quit", "read": "read", "say": "said",
        "seek": "sought", "sell": "sold", "send": "sent", "set": "set",
        "shed": "shed", "shine": "shone", "shut": "shut", "sit": "sat",
        "sleep": "slept", "slide": "slid", "sling": "slung", "slit": "slit",
        "speed": "sped", "spend": "spent", "spin": "spun", "spit": "spat",
        "split": "split", "spread": "spread", "stand": "stood",
        "stick": "stuck", "sting": "stung", "strike": "struck",
        "sweep": "swept", "swing": "swung", "teach": "taught", "tell": "told",
        "think": "thought", "thrust": "thrust", "weep": "wept", "win": "won",
        "wind": "wound", "wring": "wrung",
        # prefixed forms
        "inlay": "inlaid", "overhear": "overheard", "oversleep": "overslept",
        "rebuild": "rebuilt", "remake": "remade", "repay": "repaid",
        "retell": "retold", "rewind": "rewound", "unbind": "unbound",
        "understand": "understood", "unwind": "unwound", "uphold": "upheld",
        "withhold": "withheld", "withstand": "withstood",
        # archaic / literary
        "abide": "abode", "behold": "beheld", "beseech": "besought",
        "beset": "beset", "dwell": "dwelt", "wet": "wet",
    }
)

# Past tense forms of verbs whose participle differs (go -> went / gone).
IRREGULAR_PAST_ONLY: Mapping[str, str] = _frozen(
    {
        "be": "was", "am": "was", "is": "was", "are": "were",
        "has": "had", "do": "did", "does": "did",
        "arise": "arose", "awake": "awoke", "bear": "bore", "beat": "beat",
        "become": "became", "begin": "began", "bite": "bit", "blow": "blew",
        "break": "broke", "choose": "chose", "come": "came", "draw": "drew",
        "drink": "drank", "drive": "drove", "eat": "ate", "fall": "fell",
        "fly": "flew", "forget": "forgot", "forgive": "forgave",
        "freeze": "froze", "give": "gave", "go": "went", "grow": "grew",
        "hide": "hid", "know": "knew", "lie": "lay", "ride": "rode",
        "ring": "rang", "rise": "rose", "run": "ran", "see": "saw",
        "shake": "shook", "shrink": "shrank", "sing": "sang", "sink": "sank",
        "speak": "spoke", "spring": "sprang", "steal": "stole",
        "stink": "stank", "stride": "strode", "swear": "swore", "swim": "swam",
        "take": "took", "tear": "tore", "throw": "threw", "tread": "trod",
        "wake": "woke", "wear": "wore", "weave": "wove", "write": "wrote",
        "beget": "begot", "cleave": "clove", "forego": "forewent",
        "foresee": "foresaw", "forsake": "forsook", "mistake": "mistook",
        "outdo": "outdid", "outgrow": "outgrew", "overcome": "overcame",
        "overdo": "overdid", "override": "overrode", "oversee": "oversaw",
        "overtake": "overtook", "overthrow": "overthrew",
        "partake": "partook", "redo": "redid", "rewrite": "rewrote",
        "slay": "slew", "smite": "smote", "strive": "strove",
        "undergo": "underwent", "undertake": "undertook", "undo": "undid",
        "withdraw": "withdrew",
        # unchanged in the past
        "bust": "bust", "cast": "cast", "fit": "fit", "forecast": "forecast",
        "knit": "knit", "preset": "preset", "proofread": "proofread",
        "reread": "reread", "reset": "reset", "rid": "rid", "sublet": "sublet",
        "upset": "upset", "wed": "wed",
        # modals
        "can": "could", "may": "might", "shall": "should", "will": "would",
    }
)

# Past participles of verbs whose past tense differs.
IRREGULAR_PARTICIPLE_ONLY: Mapping[str, str] = _frozen(
    {
        "be": "been", "do": "done",
        "arise": "arisen", "awake": "awoken", "bear": "borne",
        "beat": "beaten", "become": "become", "begin": "begun",
        "bite": "bitten", "blow": "blown", "break": "broken",
        "choose": "chosen", "come": "come", "draw": "drawn", "drink": "drunk",
        "drive": "driven", "eat": "eaten", "fall": "fallen", "fly": "flown",
        "forbid": "forbidden", "forget": "forgotten", "forgive": "forgiven",
        "freeze": "frozen", "give": "given", "go": "gone", "grow": "grown",
        "hide": "hidden", "know": "known", "lie": "lain", "ride": "ridden",
        "ring": "rung", "rise": "risen", "run": "run", "see": "seen",
        "shake": "shaken", "shrink": "shrunk", "sing": "sung", "sink": "sunk",
        "speak": "spoken", "spring": "sprung", "steal": "stolen",
        "stink": "stunk", "stride": "stridden", "swear": "sworn",
        "swim": "swum", "take": "taken", "tear": "torn", "throw": "thrown",
        "tread": "trodden", "wake": "woken", "wear": "worn", "weave": "woven",
        "write": "written",
        "beget": "begotten", "cleave": "cloven", "forego": "foregone",
        "foresee": "foreseen", "forsake": "forsaken", "mistake": "mistaken",
        "outdo": "outdone", "outgrow": "outgrown", "overcome": "overcome",
        "overdo": "overdone", "override": "overridden", "oversee": "overseen",
        "overtake": "overtaken", "overthrow": "overthrown",
        "partake": "partaken", "redo": "redone", "rewrite": "rewritten",
        "slay": "slain", "smite": "smitten", "strive": "striven",
        "undergo": "undergone", "undertake": "undertaken", "undo": "undone",
        "withdraw": "withdrawn",
        "hew": "hewn", "lade": "laden", "mow": "mown", "prove": "proven",
        "saw": "sawn", "sew": "sewn", "shear": "shorn", "show": "shown",
        "sow": "sown", "strew": "strewn", "string": "strung",
        "burn": "burnt", "dream": "dreamt", "lean": "leant", "leap": "leapt",
        "learn": "learnt", "smell": "smelt", "spell": "spelt", "spill": "spilt",
        "spoil": "spoilt",
        "shoot": "shot",
    }
)

# Every irregular participle: the shared forms plus the participle-only ones.
IRREGULAR_PAST_PARTICIPLES: Mapping[str, str] = _frozen(
    {**IRREGULAR_VERBS_SAME, **IRREGULAR_PARTICIPLE_ONLY}
)

# Words recognized as participles without any suffix evidence.
KNOWN_PARTICIPLES = frozenset(
    {
        # -en / -n
        "been", "beaten", "bitten", "blown", "broken", "chosen", "driven",
        "eaten", "fallen", "forbidden", "forgotten", "forgiven", "frozen",
        "given", "gone", "grown", "hidden", "known", "lain", "proven",
        "ridden", "risen", "seen", "shaken", "shown", "spoken", "stolen",
        "stridden", "striven", "sworn", "taken", "torn", "trodden", "woken",
        "worn", "woven", "written",
        # -t
        "bent", "built", "burnt", "crept", "dealt", "dreamt", "dwelt", "felt",
        "kept", "knelt", "leant", "leapt", "learnt", "left", "lent", "lit",
        "lost", "meant", "met", "slept", "smelt", "spelt", "spent", "spilt",
        "spoilt", "swept", "wept", "sent", "rent",
        # -ght
        "bought", "brought", "caught", "fought", "sought", "taught",
        "thought",
        # other irregular forms
        "bound", "bled", "bred", "clung", "done", "dug", "fed", "fled",
        "flung", "found", "ground", "had", "heard", "held", "hung", "laid",
        "led", "made", "paid", "rung", "said", "sat", "shed", "shone", "shot",
        "shrunk", "slid", "slit", "slung", "sold", "sped", "spun", "spat",
        "sprung", "stood", "stuck", "stung", "stunk", "struck", "strung",
        "sung", "sunk", "swum", "swung", "told", "understood", "withdrawn",
        "won", "wound", "wrung",
        # identical to the base form
        "bet", "burst", "come", "cost", "cut", "hit", "hurt", "let", "put",
        "quit", "read", "run", "set", "shut", "split", "spread", "thrust",
    }
)

# Multi-syllable verbs stressed on the last syllable (prefer -> preferred).
DOUBLE_CONSONANT_VERBS = frozenset(
    {
        "admit", "begin", "commit", "compel", "confer", "control", "defer",
        "deter", "equip", "excel", "expel", "forget", "incur", "occur", "omit",
        "patrol", "permit", "prefer", "propel", "rebel", "recur", "refer",
        "regret", "repel", "submit", "transfer", "transmit", "upset",
    }
)

# -ing / -ed words that are not participles.
_ING_NON_PARTICIPLES = frozenset(
    {
        "sing", "ring", "bring", "thing", "king", "wing", "spring", "string",
        "swing", "sting", "sling", "cling",
    }
)
_ED_NON_PARTICIPLES = frozenset(
    {"bed", "red", "shed", "wed", "sled", "ted", "ned", "fed"}
)


# ---------------------------------------------------------------------------
# 2. Past tense
# ---------------------------------------------------------------------------


def past_tense(verb: str) -> str:
    if not verb:
        return ""

    lower = verb.lower()
    irregular = IRREGULAR_VERBS_SAME.get(lower) or IRREGULAR_PAST_ONLY.get(lower)
    if irregular is not None:
        return match_case(verb, irregular)

    if lower.endswith("e"):
        return verb + match_suffix(verb, "d")

    if len(lower) > 1 and lower.endswith("y") and not is_vowel(lower[-2]):
        return verb[:-1] + match_suffix(verb, "ied")

    if len(lower) > 1 and lower.endswith("c"):
        return verb + match_suffix(verb, "ked")

    if should_double_final_consonant(lower, DOUBLE_CONSONANT_VERBS):
        return verb + match_suffix(verb, lower[-1] + "ed")

    return verb + match_suffix(verb, "ed")


# ---------------------------------------------------------------------------
# 3. Participles
# ---------------------------------------------------------------------------


def _is_doubled_ing_form(lower: str) -> bool:
    # "running", "stopping": doubled consonant right before -ing
    if not lower.endswith("ing") or len(lower) < 5:
        return False
    before = lower[-4]
    return before == lower[-5] and not is_vowel(before)


def present_participle(verb: str) -> str:
    """
    Present participle (-ing form).

    run -> running, make -> making, die -> dying, see -> seeing,
    panic -> panicking, be -> being. Words that already look like a
    doubled-consonant participle ("running") are returned unchanged.
    """
    if not verb:
        return ""

    lower = verb.lower()
    n = len(lower)

    if _is_doubled_ing_form(lower):
        return verb

    if n == 1:
        return verb + match_suffix(verb, "ing")

    if lower.endswith("ie"):
        return verb[:-2] + match_suffix(verb, "ying")

    if lower.endswith(("ee", "ye", "oe", "nge")):
        return verb + match_suffix(verb, "ing")

    if lower.endswith("c"):
        return verb + match_suffix(verb, "king")

    if lower.endswith("e"):
        if not is_vowel(lower[-2]) and count_vowels(lower[:-1]) > 0:
            return verb[:-1] + match_suffix(verb, "ing")
        return verb + match_suffix(verb, "ing")

    if should_double_consonant(lower, DOUBLE_CONSONANT_VERBS):
        return verb + match_suffix(verb, lower[-1] + "ing")

    return verb + match_suffix(verb, "ing")


def past_participle(verb: str) -> str:
    if not verb:
        return ""

    lower = verb.lower()
    irregular = IRREGULAR_PAST_PARTICIPLES.get(lower)
    if irregular is not None:
        return match_case(verb, irregular)

    if len(lower) == 1:
        return verb + match_suffix(verb, "ed")

    if lower.endswith("e"):
        return verb + match_suffix(verb, "d")

    if lower.endswith("y") and not is_vowel(lower[-2]):
        return verb[:-1] + match_suffix(verb, "ied")

    if lower.endswith("c"):
        return verb + match_suffix(verb, "ked")

    if should_double_consonant(lower, DOUBLE_CONSONANT_VERBS):
        return verb + match_suffix(verb, lower[-1] + "ed")

    return verb + match_suffix(verb, "ed")


def future_tense(verb: str) -> str:
    """Prefix "will"; the auxiliary takes the case of the verb (Go -> Will Go)."""
    if not verb:
        return ""
    return match_case(verb, "will") + " " + verb


def is_participle(word: str) -> bool:
    """
    Heuristic participle check: a known irregular participle, or an -ing /
    -ed form that is not one of the common look-alikes ("thing", "bed").
    """
    if not word:
        return False

    lower = word.lower()
    n = len(lower)

    if lower in KNOWN_PARTICIPLES:
        return True

    if lower.endswith("ing") and n >= 4:
        return lower not in _ING_NON_PARTICIPLES

    if lower.endswith("ed") and n >= 3:
        return lower not in _ED_NON_PARTICIPLES

    return False


__all__ = [
    "IRREGULAR_VERBS_SAME",
    "IRREGULAR_PAST_ONLY",
    "IRREGULAR_PARTICIPLE_ONLY",
    "IRREGULAR_PAST_PARTICIPLES",
    "KNOWN_PARTICIPLES",
    "DOUBLE_CONSONANT_VERBS",
    "past_tense",
    "present_participle",
    "past_participle",
    "future_tense",
    "is_participle",
]
