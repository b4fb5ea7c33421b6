"""Word lists for the rule-based backend.

English closed-class words, a verb lexicon, suffix tables for tagging,
and a polarity lexicon for sentiment scoring.
"""

PRONOUNS: frozenset[str] = frozenset(
    {
        "i", "me", "my", "mine", "myself",
        "you", "your", "yours", "yourself", "yourselves",
        "he", "him", "his", "himself",
        "she", "her", "hers", "herself",
        "it", "its", "itself",
        "we", "us", "our", "ours", "ourselves",
        "they", "them", "their", "theirs", "themselves",
        "who", "whom", "whose", "what", "which",
        "someone", "somebody", "something", "anyone", "anybody", "anything",
        "everyone", "everybody", "everything", "nobody", "nothing",
        "i'm", "i've", "i'll", "i'd", "you're", "you've", "you'll",
        "we're", "we've", "we'll", "they're", "they've", "they'll",
        "he's", "she's", "it's", "that's", "there's", "what's",
    }
)

# Pronouns that can open a clause and be followed by a finite verb.
SUBJECT_PRONOUNS: frozenset[str] = frozenset(
    {"i", "you", "he", "she", "it", "we", "they", "who"}
)

DETERMINERS: frozenset[str] = frozenset(
    {
        "a", "an", "the", "this", "that", "these", "those",
        "some", "any", "each", "every", "either", "neither",
        "no", "another", "such", "all", "both", "few", "many",
        "much", "more", "most", "several", "other",
    }
)

# Possessives behave like determiners for the noun-context rule.
POSSESSIVES: frozenset[str] = frozenset(
    {"my", "your", "his", "her", "its", "our", "their"}
)

PREPOSITIONS: frozenset[str] = frozenset(
    {
        "about", "above", "across", "after", "against", "along", "among",
        "around", "at", "before", "behind", "below", "beneath", "beside",
        "between", "beyond", "by", "despite", "down", "during", "except",
        "for", "from", "in", "inside", "into", "like", "near", "of", "off",
        "on", "onto", "out", "outside", "over", "past", "since", "through",
        "throughout", "till", "to", "toward", "towards", "under", "until",
        "up", "upon", "via", "with", "within", "without",
    }
)

CONJUNCTIONS: frozenset[str] = frozenset(
    {
        "and", "or", "but", "nor", "so", "yet", "because", "although",
        "though", "unless", "while", "whereas", "if", "whether", "than",
        "once", "when", "whenever", "where", "wherever",
    }
)

ADVERBS: frozenset[str] = frozenset(
    {
        "again", "almost", "already", "also", "always", "anyway", "away",
        "back", "even", "ever", "here", "how", "however", "just", "later",
        "maybe", "never", "not", "now", "often", "once", "perhaps", "quite",
        "rather", "really", "seldom", "sometimes", "soon", "still", "then",
        "there", "therefore", "today", "together", "tomorrow", "tonight",
        "too", "very", "well", "why", "yesterday", "instead", "else",
        "n't", "yet", "ago", "indeed", "otherwise",
    }
)

INTERJECTIONS: frozenset[str] = frozenset(
    {"oh", "ah", "hey", "hi", "hello", "wow", "okay", "ok", "yes", "yeah", "um", "uh", "please", "thanks"}
)

# Forms of be/have/do and the modals. Tagged as verbs, like any tagger would.
AUXILIARIES: frozenset[str] = frozenset(
    {
        "be", "am", "is", "are", "was", "were", "been", "being",
        "have", "has", "had", "having",
        "do", "does", "did", "doing", "done",
        "can", "could", "may", "might", "must", "shall", "should",
        "will", "would", "ought",
        "isn't", "aren't", "wasn't", "weren't", "haven't", "hasn't",
        "hadn't", "don't", "doesn't", "didn't", "can't", "couldn't",
        "won't", "wouldn't", "shouldn't", "mustn't",
    }
)

# Words after which the next open-class word is most likely a base verb.
VERB_CUES: frozenset[str] = frozenset(
    {
        "to", "can", "could", "may", "might", "must", "shall", "should",
        "will", "would", "don't", "doesn't", "didn't", "can't", "won't",
        "let's", "please",
    }
)

BASE_VERBS: frozenset[str] = frozenset(
    {
        "accept", "add", "agree", "allow", "answer", "apply", "arrange",
        "arrive", "ask", "attend", "avoid", "bake", "become", "begin",
        "believe", "book", "borrow", "break", "bring", "build", "buy",
        "call", "cancel", "carry", "catch", "change", "check", "choose",
        "clean", "close", "collect", "come", "complete", "confirm",
        "consider", "contact", "continue", "cook", "cost", "create", "cut",
        "decide", "deliver", "describe", "design", "discuss", "draft",
        "draw", "drink", "drive", "drop", "email", "enjoy", "explain",
        "fall", "feel", "fetch", "fill", "find", "finish", "fix", "follow",
        "forget", "get", "give", "grab", "grow", "happen", "hate", "hear",
        "help", "hire", "hold", "hope", "improve", "include", "invite",
        "join", "keep", "know", "learn", "leave", "lend", "like", "listen",
        "live", "look", "lose", "love", "make", "mean", "meet", "mention",
        "miss", "move", "need", "order", "organize", "pack", "pay", "pick",
        "plan", "play", "prepare", "present", "print", "promise", "prove",
        "publish", "pull", "push", "put", "reach", "read", "receive",
        "record", "remember", "remind", "remove", "renew", "repair",
        "reply", "report", "request", "research", "reschedule", "respond",
        "return", "review", "ring", "run", "save", "say", "schedule", "see",
        "seem", "sell", "send", "set", "share", "ship", "show", "sign",
        "sing", "sit", "sleep", "speak", "spend", "stand", "start", "stay",
        "stop", "study", "submit", "suggest", "support", "take", "talk",
        "teach", "tell", "test", "text", "thank", "think", "travel", "try",
        "turn", "understand", "update", "use", "visit", "wait", "wake",
        "walk", "want", "wash", "watch", "win", "wish", "wonder", "work",
        "worry", "write",
    }
)

IRREGULAR_VERB_FORMS: frozenset[str] = frozenset(
    {
        "became", "began", "begun", "bought", "brought", "built", "came",
        "caught", "chose", "chosen", "drank", "drew", "drawn", "drove",
        "driven", "ate", "eaten", "fell", "fallen", "felt", "found", "forgot",
        "forgotten", "gave", "given", "got", "gotten", "went", "gone", "grew",
        "grown", "heard", "held", "kept", "knew", "known", "learnt", "left",
        "lent", "lost", "made", "meant", "met", "paid", "ran", "said", "sang",
        "sung", "sat", "saw", "seen", "sold", "sent", "slept", "spoke",
        "spoken", "spent", "stood", "taught", "told", "thought", "took",
        "taken", "understood", "woke", "woken", "won", "wrote", "written",
    }
)

ADJECTIVES: frozenset[str] = frozenset(
    {
        "able", "bad", "best", "better", "big", "busy", "cheap", "clear",
        "close", "cold", "common", "current", "dark", "dear", "difficult",
        "early", "easy", "empty", "entire", "expensive", "extra", "fair",
        "final", "fine", "free", "fresh", "friendly", "full", "good",
        "great", "happy", "hard", "heavy", "high", "hot", "huge", "important",
        "large", "last", "late", "least", "less", "little", "long", "lovely",
        "low", "main", "major", "minor", "new", "next", "nice", "old", "only",
        "open", "other", "own", "poor", "possible", "pretty", "previous",
        "quick", "ready", "real", "recent", "right", "sad", "same", "short",
        "sick", "simple", "slow", "small", "special", "strong", "sure",
        "tired", "true", "upset", "urgent", "weekly", "whole", "wide",
        "wonderful", "worse", "worst", "wrong", "young", "angry", "awful",
        "terrible", "horrible", "excellent", "amazing", "fantastic", "calm",
        "glad", "nervous", "proud", "excited", "worried", "annoyed",
        "disappointed", "frustrated", "stressed", "relaxed", "confident",
    }
)

# Words ending in -ly that are not adverbs.
LY_NON_ADVERBS: frozenset[str] = frozenset(
    {
        "family", "reply", "supply", "apply", "assembly", "butterfly",
        "july", "italy", "anomaly", "ally", "rally", "belly", "jelly",
        "bully", "fly", "holy", "ugly", "early", "friendly", "lovely",
        "lonely", "likely", "daily", "weekly", "monthly", "yearly", "only",
        "silly", "costly", "elderly", "lively", "deadly", "curly",
    }
)

ADJECTIVE_SUFFIXES: tuple[str, ...] = (
    "ous", "ful", "less", "able", "ible",
)

NOUN_SUFFIXES: tuple[str, ...] = (
    "tion", "sion", "ment", "ness", "ity", "ship", "ance", "ence",
    "ism", "ist", "hood", "dom", "ery", "age", "ure",
)

VERB_SUFFIXES: tuple[str, ...] = ("ize", "ify")

# Words ending in -ing / -ed that are not verb forms.
ING_NOUNS: frozenset[str] = frozenset(
    {
        "morning", "evening", "ceiling", "building", "meeting", "wedding",
        "spring", "string", "sibling", "pudding", "darling", "lightning",
        "clothing", "offspring", "stocking", "awning",
    }
)

ED_NON_VERBS: frozenset[str] = frozenset(
    {
        "hundred", "speed", "seed", "greed", "breed", "sacred", "naked",
        "wicked", "kindred", "shed", "bred", "embed", "steed", "creed",
    }
)

NEGATIONS: frozenset[str] = frozenset(
    {
        "not", "no", "never", "n't", "nothing", "nobody", "none", "nowhere",
        "neither", "nor", "without", "hardly", "barely", "cannot",
        "isn't", "aren't", "wasn't", "weren't", "don't", "doesn't", "didn't",
        "can't", "couldn't", "won't", "wouldn't", "shouldn't", "haven't",
        "hasn't", "hadn't", "mustn't",
    }
)

# Multipliers applied to the next polar word.
INTENSIFIERS: dict[str, float] = {
    "absolutely": 0.293,
    "completely": 0.293,
    "deeply": 0.293,
    "especially": 0.293,
    "extremely": 0.293,
    "highly": 0.293,
    "incredibly": 0.293,
    "really": 0.293,
    "so": 0.293,
    "super": 0.293,
    "totally": 0.293,
    "truly": 0.293,
    "very": 0.293,
    "barely": -0.293,
    "slightly": -0.293,
    "somewhat": -0.293,
    "kinda": -0.293,
}

# Valence on a -4..+4 scale.
POLARITY: dict[str, float] = {
    # positive
    "accomplished": 1.9,
    "amazing": 2.8,
    "awesome": 3.1,
    "beautiful": 2.9,
    "best": 3.2,
    "better": 1.9,
    "brilliant": 2.8,
    "calm": 1.3,
    "celebrate": 2.7,
    "cheerful": 2.5,
    "comfortable": 1.5,
    "confident": 2.2,
    "cool": 1.3,
    "delicious": 2.7,
    "delighted": 2.9,
    "easy": 1.9,
    "enjoy": 2.2,
    "enjoyed": 2.3,
    "excellent": 2.7,
    "excited": 2.2,
    "exciting": 2.2,
    "fantastic": 2.6,
    "fine": 0.8,
    "fun": 2.3,
    "glad": 2.0,
    "good": 1.9,
    "grateful": 2.0,
    "great": 3.1,
    "happy": 2.7,
    "helpful": 1.8,
    "hope": 1.9,
    "hopeful": 1.7,
    "impressive": 2.3,
    "improved": 2.0,
    "liked": 1.8,
    "love": 3.2,
    "loved": 2.9,
    "lovely": 2.8,
    "lucky": 1.8,
    "nice": 1.8,
    "peaceful": 2.2,
    "perfect": 2.7,
    "pleasant": 2.3,
    "pleased": 1.9,
    "productive": 1.9,
    "proud": 2.1,
    "recommend": 1.5,
    "relaxed": 2.2,
    "relieved": 1.5,
    "success": 2.7,
    "successful": 2.8,
    "thank": 1.5,
    "thanks": 1.9,
    "thankful": 2.3,
    "win": 2.8,
    "wonderful": 2.7,
    "yay": 2.4,
    # negative
    "afraid": -2.2,
    "angry": -2.3,
    "annoyed": -1.6,
    "annoying": -1.7,
    "anxious": -1.0,
    "awful": -2.0,
    "bad": -2.5,
    "boring": -1.3,
    "broken": -1.6,
    "cancelled": -1.0,
    "confused": -1.3,
    "crash": -1.7,
    "cry": -2.1,
    "depressed": -2.3,
    "difficult": -1.5,
    "disappointed": -1.9,
    "disappointing": -2.2,
    "disaster": -3.1,
    "dislike": -1.6,
    "exhausted": -1.5,
    "fail": -2.5,
    "failed": -2.3,
    "failure": -2.3,
    "fear": -2.2,
    "frustrated": -2.4,
    "frustrating": -1.9,
    "hate": -2.7,
    "hated": -3.2,
    "horrible": -2.5,
    "hurt": -2.4,
    "lonely": -1.5,
    "lost": -1.3,
    "mess": -1.5,
    "miss": -0.6,
    "nervous": -1.1,
    "pain": -2.3,
    "poor": -2.1,
    "problem": -1.7,
    "problems": -1.7,
    "sad": -2.1,
    "scared": -1.9,
    "sick": -2.3,
    "sorry": -0.3,
    "stress": -1.8,
    "stressed": -1.4,
    "stressful": -2.3,
    "stuck": -1.0,
    "terrible": -2.1,
    "tired": -1.9,
    "ugly": -2.3,
    "unfortunately": -1.9,
    "unhappy": -1.8,
    "upset": -1.6,
    "worried": -1.2,
    "worry": -1.9,
    "worse": -2.1,
    "worst": -3.1,
    "wrong": -2.1,
}

# Common abbreviations whose trailing period does not end a sentence.
ABBREVIATIONS: frozenset[str] = frozenset(
    {
        "mr", "mrs", "ms", "dr", "prof", "sr", "jr", "st", "vs", "etc",
        "e.g", "i.e", "approx", "dept", "inc", "ltd", "co",
        "jan", "feb", "apr", "jun", "jul", "aug", "sep", "sept",
        "oct", "nov", "dec", "mon", "tue", "thu", "fri",
        "a.m", "p.m",
    }
)


__all__ = [
    "ABBREVIATIONS",
    "ADJECTIVES",
    "ADJECTIVE_SUFFIXES",
    "ADVERBS",
    "AUXILIARIES",
    "BASE_VERBS",
    "CONJUNCTIONS",
    "DETERMINERS",
    "ED_NON_VERBS",
    "ING_NOUNS",
    "INTENSIFIERS",
    "INTERJECTIONS",
    "IRREGULAR_VERB_FORMS",
    "LY_NON_ADVERBS",
    "NEGATIONS",
    "NOUN_SUFFIXES",
    "POLARITY",
    "POSSESSIVES",
    "PREPOSITIONS",
    "PRONOUNS",
    "SUBJECT_PRONOUNS",
    "VERB_CUES",
    "VERB_SUFFIXES",
]
