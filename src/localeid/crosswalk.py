"""
Crosswalk between Gettext modifiers and Unicode script codes.

Gettext writes a script as a modifier ("sr_RS@latin"), the Unicode
notation writes it as a subtag ("sr-Latn-RS"). SCRIPT_MODIFIERS holds the
mapping as an ordered table of ISO 15924 codes and lower-case names.

IMPORTANT:
    Some names appear more than once (arabic, cyrillic, georgian, syriac).
    Both lookups scan in table order and stop at the first match, so

        modifier_to_script("georgian") == "Geok"
        script_to_modifier("Geor") == "georgian"

    Do not turn this into a dict keyed on either column.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class ScriptModifier:
    """One row of the crosswalk."""

    modifier: str
    script: str


SCRIPT_MODIFIERS: Tuple[ScriptModifier, ...] = tuple(
    ScriptModifier(modifier, script)
    for modifier, script in (
        ("adlam", "Adlm"),
        ("caucasianalbanian", "Aghb"),
        ("ahom", "Ahom"),
        ("arabic", "Arab"),
        ("arabic", "Aran"),
        ("imperialaramaic", "Armi"),
        ("armenian", "Armn"),
        ("avestan", "Avst"),
        ("balinese", "Bali"),
        ("bamum", "Bamu"),
        ("bassavah", "Bass"),
        ("batak", "Batk"),
        ("bengali", "Beng"),
        ("bhaiksuki", "Bhks"),
        ("bopomofo", "Bopo"),
        ("brahmi", "Brah"),
        ("braille", "Brai"),
        ("buginese", "Bugi"),
        ("buhid", "Buhd"),
        ("chakma", "Cakm"),
        ("canadianaboriginal", "Cans"),
        ("carian", "Cari"),
        ("cham", "Cham"),
        ("cherokee", "Cher"),
        ("chorasmian", "Chrs"),
        ("coptic", "Copt"),
        ("cyprominoan", "Cpmn"),
        ("cypriot", "Cprt"),
        ("cyrillic", "Cyrl"),
        ("cyrillic", "Cyrs"),
        ("devanagari", "Deva"),
        ("divesakuru", "Diak"),
        ("dogra", "Dogr"),
        ("deseret", "Dsrt"),
        ("duployan", "Dupl"),
        ("egyptiandemotic", "Egyd"),
        ("egyptianhieratic", "Egyh"),
        ("egyptianhieroglyphs", "Egyp"),
        ("elbasan", "Elba"),
        ("elymaic", "Elym"),
        ("ethiopic", "Ethi"),
        ("georgian", "Geok"),
        ("georgian", "Geor"),
        ("glagolitic", "Glag"),
        ("gunjalagondi", "Gong"),
        ("masaramgondi", "Gonm"),
        ("gothic", "Goth"),
        ("grantha", "Gran"),
        ("greek", "Grek"),
        ("gujarati", "Gujr"),
        ("gurmukhi", "Guru"),
        ("hangul", "Hang"),
        ("han", "Hani"),
        ("hanunoo", "Hano"),
        ("simplifiedhan", "Hans"),
        ("traditionalhan", "Hant"),
        ("hatran", "Hatr"),
        ("hebrew", "Hebr"),
        ("hiragana", "Hira"),
        ("anatolianhieroglyphs", "Hluw"),
        ("pahawhhmong", "Hmng"),
        ("nyiakengpuachuehmong", "Hmnp"),
        ("katakanaorhiragana", "Hrkt"),
        ("oldhungarian", "Hung"),
        ("olditalic", "Ital"),
        ("jamo", "Jamo"),
        ("javanese", "Java"),
        ("kayahli", "Kali"),
        ("katakana", "Kana"),
        ("kawi", "Kawi"),
        ("kharoshthi", "Khar"),
        ("khmer", "Khmr"),
        ("khojki", "Khoj"),
        ("khitansmallscript", "Kits"),
        ("kannada", "Knda"),
        ("kaithi", "Kthi"),
        ("taitham", "Lana"),
        ("lao", "Laoo"),
        ("fraktur", "Latf"),
        ("gaelic", "Latg"),
        ("latin", "Latn"),
        ("lepcha", "Lepc"),
        ("limbu", "Limb"),
        ("lineara", "Lina"),
        ("linearb", "Linb"),
        ("lisu", "Lisu"),
        ("lycian", "Lyci"),
        ("lydian", "Lydi"),
        ("mahajani", "Mahj"),
        ("makasar", "Maka"),
        ("mandaic", "Mand"),
        ("manichaean", "Mani"),
        ("marchen", "Marc"),
        ("medefaidrin", "Medf"),
        ("mendekikakui", "Mend"),
        ("meroiticcursive", "Merc"),
        ("meroitichieroglyphs", "Mero"),
        ("malayalam", "Mlym"),
        ("modi", "Modi"),
        ("mongolian", "Mong"),
        ("mro", "Mroo"),
        ("meeteimayek", "Mtei"),
        ("multani", "Mult"),
        ("myanmar", "Mymr"),
        ("nagmundari", "Nagm"),
        ("nandinagari", "Nand"),
        ("oldnortharabian", "Narb"),
        ("nabataean", "Nbat"),
        ("newa", "Newa"),
        ("nko", "Nkoo"),
        ("nushu", "Nshu"),
        ("ogham", "Ogam"),
        ("olchiki", "Olck"),
        ("oldturkic", "Orkh"),
        ("oriya", "Orya"),
        ("osage", "Osge"),
        ("osmanya", "Osma"),
        ("olduyghur", "Ougr"),
        ("palmyrene", "Palm"),
        ("paucinhau", "Pauc"),
        ("oldpermic", "Perm"),
        ("phagspa", "Phag"),
        ("inscriptionalpahlavi", "Phli"),
        ("psalterpahlavi", "Phlp"),
        ("phoenician", "Phnx"),
        ("miao", "Plrd"),
        ("inscriptionalparthian", "Prti"),
        ("rejang", "Rjng"),
        ("hanifirohingya", "Rohg"),
        ("runic", "Runr"),
        ("samaritan", "Samr"),
        ("oldsoutharabian", "Sarb"),
        ("saurashtra", "Saur"),
        ("signwriting", "Sgnw"),
        ("shavian", "Shaw"),
        ("sharada", "Shrd"),
        ("siddham", "Sidd"),
        ("khudawadi", "Sind"),
        ("sinhala", "Sinh"),
        ("sogdian", "Sogd"),
        ("oldsogdian", "Sogo"),
        ("sorasompeng", "Sora"),
        ("soyombo", "Soyo"),
        ("sundanese", "Sund"),
        ("sylotinagri", "Sylo"),
        ("syriac", "Syrc"),
        ("syriac", "Syre"),
        ("syriac", "Syrj"),
        ("syriac", "Syrn"),
        ("tagbanwa", "Tagb"),
        ("takri", "Takr"),
        ("taile", "Tale"),
        ("newtailue", "Talu"),
        ("tamil", "Taml"),
        ("tangut", "Tang"),
        ("taiviet", "Tavt"),
        ("telugu", "Telu"),
        ("tifinagh", "Tfng"),
        ("tagalog", "Tglg"),
        ("thaana", "Thaa"),
        ("thai", "Thai"),
        ("tibetan", "Tibt"),
        ("tirhuta", "Tirh"),
        ("tangsa", "Tnsa"),
        ("toto", "Toto"),
        ("ugaritic", "Ugar"),
        ("vai", "Vaii"),
        ("vithkuqi", "Vith"),
        ("warangciti", "Wara"),
        ("wancho", "Wcho"),
        ("oldpersian", "Xpeo"),
        ("cuneiform", "Xsux"),
        ("yezidi", "Yezi"),
        ("yi", "Yiii"),
        ("zanabazarsquare", "Zanb"),
    )
)


def modifier_to_script(modifier: Optional[str]) -> Optional[str]:
    """
    Find the script code for a Gettext modifier.

    Args:
        modifier: Modifier name, any case ("latin", "Latin")

    Returns:
        Script code of the first matching row ("Latn"), or None
    """
    if modifier is None:
        return None
    wanted = modifier.lower()
    for row in SCRIPT_MODIFIERS:
        if row.modifier == wanted:
            return row.script
    return None


def script_to_modifier(script: Optional[str]) -> Optional[str]:
    """
    Find the Gettext modifier for a script code.

    Args:
        script: ISO 15924 code, any case ("Latn", "LATN")

    Returns:
        Modifier of the first matching row ("latin"), or None
    """
    if script is None:
        return None
    wanted = script.lower()
    for row in SCRIPT_MODIFIERS:
        if row.script.lower() == wanted:
            return row.modifier
    return None


__all__ = [
    "ScriptModifier",
    "SCRIPT_MODIFIERS",
    "modifier_to_script",
    "script_to_modifier",
]
