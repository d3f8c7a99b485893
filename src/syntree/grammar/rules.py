"""
Per-language production rules.

Each supported language has one static LanguageGrammar describing the only
legal left-to-right order of phrases under the sentence root, the phrases
that must be present, and the arity and child-tag constraints of every
phrase tag.
"""

import math

from attrs import field, frozen

from syntree.core.types import LanguageCode, PartOfSpeech, PhraseTag, tag_value

DET = PartOfSpeech.DET.value
PRON = PartOfSpeech.PRON.value
NOUN = PartOfSpeech.NOUN.value
VERB = PartOfSpeech.VERB.value
AUX = PartOfSpeech.AUX.value
ADJ = PartOfSpeech.ADJ.value
ADV = PartOfSpeech.ADV.value
PREP = PartOfSpeech.PREP.value
POST = PartOfSpeech.POST.value
NUM = PartOfSpeech.NUM.value

NP = PhraseTag.NP.value
VP = PhraseTag.VP.value
PP = PhraseTag.PP.value
AP = PhraseTag.AP.value
ADVP = PhraseTag.ADVP.value


@frozen
class PhraseRule:
    """Child-count bounds and allowed child tags of one phrase tag."""

    min_children: int
    max_children: int
    allowed_child_types: frozenset[str] = field(converter=frozenset)


@frozen
class LanguageGrammar:
    """
    Static grammar of one language.

    Params:
        code: Language the grammar belongs to
        phrase_order: Legal left-to-right order of the root's phrase children
        required_phrases: Phrase tags that must appear under the root
        optional_phrases: Phrase tags that may appear under the root
        phrase_rules: Constraints per phrase tag
    """

    code: LanguageCode
    phrase_order: tuple[str, ...] = field(converter=tuple)
    required_phrases: frozenset[str] = field(converter=frozenset)
    optional_phrases: frozenset[str] = field(converter=frozenset)
    phrase_rules: dict[str, PhraseRule]

    def allowed_child_types(self, phrase_tag) -> frozenset[str]:
        """Tags a phrase may contain; empty for tags without a rule."""
        rule = self.phrase_rules.get(tag_value(phrase_tag))
        return rule.allowed_child_types if rule else frozenset()

    def child_count_bounds(self, phrase_tag) -> tuple[int, float]:
        """Inclusive (min, max) child count; ``(0, inf)`` for tags without a rule."""
        rule = self.phrase_rules.get(tag_value(phrase_tag))
        if rule is None:
            return 0, math.inf
        return rule.min_children, rule.max_children

    def has_rule(self, phrase_tag) -> bool:
        return tag_value(phrase_tag) in self.phrase_rules

    def order_index(self, phrase_tag) -> int | None:
        """Position of a tag in the phrase order, or None when it is absent."""
        try:
            return self.phrase_order.index(tag_value(phrase_tag))
        except ValueError:
            return None


def _svo_rules(np_max: int, np_types: set[str]) -> dict[str, PhraseRule]:
    return {
        NP: PhraseRule(1, np_max, np_types),
        VP: PhraseRule(1, 3, {VERB, AUX, ADV}),
        PP: PhraseRule(1, 4, {PREP, DET, ADJ, NOUN, PRON, NUM, NP}),
        AP: PhraseRule(1, 2, {ADJ, ADV}),
        ADVP: PhraseRule(1, 2, {ADV}),
    }


ENGLISH = LanguageGrammar(
    code=LanguageCode.EN,
    phrase_order=(NP, VP, PP, AP, ADVP),
    required_phrases={NP, VP},
    optional_phrases={PP, AP, ADVP},
    phrase_rules=_svo_rules(4, {DET, ADJ, NOUN, PRON, NUM}),
)

SPANISH = LanguageGrammar(
    code=LanguageCode.ES,
    phrase_order=(NP, VP, PP, AP, ADVP),
    required_phrases={NP, VP},
    optional_phrases={PP, AP, ADVP},
    phrase_rules=_svo_rules(4, {DET, ADJ, NOUN, PRON, NUM}),
)

# Russian noun phrases drop articles but stack adjectives and numerals
RUSSIAN = LanguageGrammar(
    code=LanguageCode.RU,
    phrase_order=(NP, VP, PP, AP, ADVP),
    required_phrases={NP, VP},
    optional_phrases={PP, AP, ADVP},
    phrase_rules=_svo_rules(5, {DET, ADJ, NOUN, PRON, NUM}),
)

# Kazakh is verb-final and marks relations with postpositions
KAZAKH = LanguageGrammar(
    code=LanguageCode.KK,
    phrase_order=(NP, PP, AP, ADVP, VP),
    required_phrases={NP, VP},
    optional_phrases={PP, AP, ADVP},
    phrase_rules={
        NP: PhraseRule(1, 4, {ADJ, NOUN, PRON, NUM, POST}),
        VP: PhraseRule(1, 3, {VERB, AUX, ADV}),
        PP: PhraseRule(1, 4, {NOUN, PRON, POST, NP}),
        AP: PhraseRule(1, 2, {ADJ, ADV}),
        ADVP: PhraseRule(1, 2, {ADV}),
    },
)
