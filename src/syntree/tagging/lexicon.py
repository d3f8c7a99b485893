"""
Word lists used for part-of-speech lookup.

Closed-class dictionaries (determiners, pronouns, adpositions, conjunctions,
auxiliaries, numerals) are small finite sets and decide a word's tag by
exact membership. Open-class seed lists (nouns, verbs, adjectives, adverbs)
back the built-in LexiconTagger capability.

Category order inside each dictionary is significant: a word listed under
two categories gets the first one.
"""

from inflection import singularize

from syntree.core.types import LanguageCode, PartOfSpeech, resolve_language

P = PartOfSpeech

CLOSED_CLASS: dict[LanguageCode, dict[PartOfSpeech, frozenset[str]]] = {
    LanguageCode.EN: {
        P.DET: frozenset(
            {"the", "a", "an", "this", "that", "these", "those", "my", "your",
             "his", "her", "its", "our", "their"}
        ),
        P.PRON: frozenset(
            {"i", "you", "he", "she", "it", "we", "they", "me", "him", "us", "them"}
        ),
        P.PREP: frozenset(
            {"in", "on", "at", "with", "by", "for", "to", "from", "under", "over"}
        ),
        P.CONJ: frozenset({"and", "or", "but", "because", "if", "when", "while"}),
        P.AUX: frozenset(
            {"is", "are", "was", "were", "am", "will", "would", "can", "could",
             "should", "must", "may", "might"}
        ),
    },
    LanguageCode.ES: {
        P.DET: frozenset(
            {"el", "la", "los", "las", "un", "una", "unos", "unas", "este", "esta"}
        ),
        P.PRON: frozenset(
            {"yo", "tú", "él", "ella", "nosotros", "vosotros", "ellos", "ellas"}
        ),
        P.PREP: frozenset({"en", "sobre", "con", "por", "para", "de", "a", "desde"}),
        P.CONJ: frozenset({"y", "o", "pero", "porque", "si", "cuando", "mientras"}),
        P.AUX: frozenset({"he", "has", "ha", "hemos", "han"}),
    },
    LanguageCode.RU: {
        P.PRON: frozenset({"я", "ты", "он", "она", "оно", "мы", "вы", "они"}),
        P.PREP: frozenset({"в", "на", "с", "у", "к", "от", "из", "под"}),
        P.CONJ: frozenset({"и", "или", "но", "если", "когда", "пока"}),
        P.NUM: frozenset({"один", "два", "три", "четыре", "пять"}),
    },
    LanguageCode.KK: {
        P.PRON: frozenset({"мен", "сен", "ол", "біз", "сіз", "олар"}),
        P.POST: frozenset({"да", "де", "та", "те", "мен", "бен", "пен"}),
        P.CONJ: frozenset({"және", "немесе", "бірақ", "өйткені", "егер", "кезде"}),
        P.NUM: frozenset({"бір", "екі", "үш", "төрт", "бес"}),
    },
}

OPEN_CLASS: dict[LanguageCode, dict[PartOfSpeech, frozenset[str]]] = {
    LanguageCode.EN: {
        P.NOUN: frozenset(
            {"cat", "dog", "book", "tree", "house", "car", "computer", "phone",
             "person", "city", "mat", "bird", "child", "teacher", "apple"}
        ),
        P.VERB: frozenset(
            {"run", "jump", "eat", "sleep", "write", "read", "walk", "talk",
             "sit", "see", "like", "sing"}
        ),
        P.ADJ: frozenset(
            {"big", "small", "red", "blue", "fast", "slow", "happy", "sad", "good", "bad"}
        ),
        P.ADV: frozenset(
            {"quickly", "slowly", "well", "badly", "very", "really", "always", "never"}
        ),
    },
    LanguageCode.ES: {
        P.NOUN: frozenset(
            {"gato", "perro", "libro", "árbol", "casa", "coche", "computadora", "teléfono"}
        ),
        P.VERB: frozenset(
            {"es", "son", "era", "estar", "corre", "salta", "come", "duerme"}
        ),
        P.ADJ: frozenset(
            {"grande", "pequeño", "rojo", "azul", "rápido", "lento", "feliz", "triste"}
        ),
        P.ADV: frozenset(
            {"rápidamente", "lentamente", "bien", "mal", "muy", "siempre", "nunca"}
        ),
    },
    LanguageCode.RU: {
        P.NOUN: frozenset(
            {"кошка", "собака", "книга", "дерево", "дом", "машина", "компьютер", "телефон"}
        ),
        P.VERB: frozenset(
            {"есть", "быть", "бежать", "прыгать", "спать", "писать", "читать", "бежит"}
        ),
        P.ADJ: frozenset(
            {"большой", "маленький", "красный", "синий", "быстрый", "медленный", "счастливый"}
        ),
        P.ADV: frozenset(
            {"быстро", "медленно", "хорошо", "плохо", "очень", "всегда", "никогда"}
        ),
    },
    LanguageCode.KK: {
        P.NOUN: frozenset(
            {"мысық", "ит", "кітап", "ағаш", "үй", "машина", "компьютер", "телефон"}
        ),
        P.VERB: frozenset(
            {"бар", "жүгіру", "секіру", "жеу", "ұйықтау", "жазу", "оқу", "оқиды"}
        ),
        P.ADJ: frozenset(
            {"үлкен", "кіші", "қызыл", "көк", "жылдам", "баяу", "бақытты"}
        ),
        P.ADV: frozenset({"жылдам", "баяу", "жақсы", "жаман", "өте", "әрқашан"}),
    },
}


def normalize_word(word: str) -> str:
    return word.strip().lower()


def _lookup(
    table: dict[PartOfSpeech, frozenset[str]], word: str
) -> PartOfSpeech | None:
    for tag, words in table.items():
        if word in words:
            return tag
    return None


def lookup_closed_class(word: str, language) -> PartOfSpeech | None:
    """
    Find a word in the closed-class dictionary of a language.

    Params:
        word: Surface word, any case
        language: Language code or name

    Returns:
        The closed-class tag, or None when the word is not listed

    Raises:
        UnsupportedLanguageError: If the language is not supported
    """
    code = resolve_language(language)
    return _lookup(CLOSED_CLASS[code], normalize_word(word))


class LexiconTagger:
    """
    Open-class tagging capability backed by the built-in seed word lists.

    English words are also looked up by their base form (``runs`` -> ``run``,
    ``cats`` -> ``cat``) using the inflection library's singularization rules,
    which strip the same ``-s``/``-es`` endings as third-person verb forms.
    """

    def __init__(self, lexicon: dict[LanguageCode, dict[PartOfSpeech, frozenset[str]]] | None = None):
        self._lexicon = lexicon if lexicon is not None else OPEN_CLASS

    def tag(self, word: str, language) -> PartOfSpeech | None:
        code = resolve_language(language)
        table = self._lexicon.get(code)
        if not table:
            return None
        normalized = normalize_word(word)
        found = _lookup(table, normalized)
        if found is None and code == LanguageCode.EN:
            base = singularize(normalized)
            if base != normalized:
                found = _lookup(table, base)
        return found

    async def atag(self, word: str, language) -> PartOfSpeech | None:
        return self.tag(word, language)
