# depconie/labels.py
"""
Метки зависимостей ParZu и теги STTS, на которые опирается извлечение аргументов.
"""

# Синтаксические отношения (столбец DEPREL в выводе ParZu)
SUBJECT = "subj"
OBJECT_LABELS = {"obja", "objd", "objg"}
COMPLEMENT = "pred"
PREPOSITIONAL_PHRASE = "pp"
PREPOSITIONAL_OBJECT = "objp"
PREPOSITION_NOUN = "pn"
RELATIVE_CLAUSE = "rel"
OBJECT_CLAUSE = "objc"
ADVERBIAL_CLAUSE = "neb"
APPOSITION = "app"
COORDINATION = "kon"
CONJUNCT = "cj"
PUNCTUATION = "punct"
ROOT = "root"

# Придаточные, поддеревья которых никогда не входят в аргумент
CLAUSE_LABELS = {RELATIVE_CLAUSE, OBJECT_CLAUSE, ADVERBIAL_CLAUSE}

# Части речи (STTS)
PROPER_NOUN = "NE"
NOUN_TAGS = {"NN", "NE"}
NOUN_GROUPS = {"N", "FM"}
PRONOMINAL_ADVERB = "PROAV"
COMMA_TAG = "$,"
COMMA = ","

# PP длиннее этого порога считается слишком специфичной для аргумента
MAX_PP_SIZE = 10

# Виртуальный корень для предложений с несколькими независимыми вершинами
VIRTUAL_ROOT_ID = 0
VIRTUAL_ROOT_DATA = "ROOT-root"
