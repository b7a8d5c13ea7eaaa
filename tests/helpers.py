"""Общие фикстуры тестов: предложения ParZu в CoNLL и заглушка извлекателя отношений."""
from typing import List, Optional, Sequence, Tuple

from depconie.core.data_structures import Span
from depconie.core.interfaces import BaseRelationExtractor
from depconie.tree.node import pos_group_for
from depconie.tree.parse_tree import DependencyParseTree
from depconie.tree.readers import read_conllu

# (id, словоформа, тег STTS, голова, метка)
Row = Tuple[int, str, str, int, str]


def make_conllu(rows: Sequence[Row], sent_id: Optional[str] = None) -> str:
    lines = []
    if sent_id is not None:
        lines.append(f"# sent_id = {sent_id}")
    lines.append("# text = " + " ".join(r[1] for r in rows))
    for node_id, form, tag, head, deprel in rows:
        lines.append("\t".join([
            str(node_id), form, form, pos_group_for(tag), tag, "_", str(head), deprel, "_", "_"
        ]))
    return "\n".join(lines) + "\n\n"


def make_tree(rows: Sequence[Row], sent_id: Optional[str] = None) -> DependencyParseTree:
    return read_conllu(make_conllu(rows, sent_id))[0]


class FiniteVerbRelationExtractor(BaseRelationExtractor):
    """Заглушка: каждый финитный глагол - отдельное отношение."""

    def extract(self, tree: DependencyParseTree) -> List[Span]:
        return [Span(tree, {leaf.id}) for leaf in tree.leaves() if leaf.pos.endswith("FIN")]


class FixedRelationExtractor(BaseRelationExtractor):
    """Заглушка: отдаёт заранее заданные наборы id."""

    def __init__(self, *id_sets):
        self.id_sets = id_sets

    def extract(self, tree: DependencyParseTree) -> List[Span]:
        return [Span(tree, ids) for ids in self.id_sets]


# Zahlungstag ist der Tag, an dem alle Mitarbeiter ihr Geld bekommen.
ZAHLUNGSTAG = [
    (1, "Zahlungstag", "NE", 2, "subj"),
    (2, "ist", "VAFIN", 0, "root"),
    (3, "der", "ART", 4, "det"),
    (4, "Tag", "NN", 2, "subj"),
    (5, ",", "$,", 0, "root"),
    (6, "an", "APPR", 12, "pp"),
    (7, "dem", "PRELS", 6, "pn"),
    (8, "alle", "PIAT", 9, "det"),
    (9, "Mitarbeiter", "NN", 12, "subj"),
    (10, "ihr", "PPOSAT", 11, "det"),
    (11, "Geld", "NN", 12, "obja"),
    (12, "bekommen", "VVFIN", 4, "rel"),
    (13, ".", "$.", 0, "root"),
]

# Peter, Maria und Hans kaufen Äpfel und Birnen.
COORDINATION = [
    (1, "Peter", "NE", 6, "subj"),
    (2, ",", "$,", 0, "root"),
    (3, "Maria", "NE", 1, "kon"),
    (4, "und", "KON", 3, "kon"),
    (5, "Hans", "NE", 4, "cj"),
    (6, "kaufen", "VVFIN", 0, "root"),
    (7, "Äpfel", "NN", 6, "obja"),
    (8, "und", "KON", 7, "kon"),
    (9, "Birnen", "NN", 8, "cj"),
    (10, ".", "$.", 0, "root"),
]

# Merkel, die Kanzlerin, besucht Paris.
APPOSITION_COMMA = [
    (1, "Merkel", "NE", 6, "subj"),
    (2, ",", "$,", 0, "root"),
    (3, "die", "ART", 4, "det"),
    (4, "Kanzlerin", "NN", 1, "app"),
    (5, ",", "$,", 0, "root"),
    (6, "besucht", "VVFIN", 0, "root"),
    (7, "Paris", "NE", 6, "obja"),
    (8, ".", "$.", 0, "root"),
]

# Präsident Obama besucht Paris.
APPOSITION_NO_COMMA = [
    (1, "Präsident", "NN", 3, "subj"),
    (2, "Obama", "NE", 1, "app"),
    (3, "besucht", "VVFIN", 0, "root"),
    (4, "Paris", "NE", 3, "obja"),
    (5, ".", "$.", 0, "root"),
]

# Peter kam und sah Maria.
VERB_COORDINATION = [
    (1, "Peter", "NE", 2, "subj"),
    (2, "kam", "VVFIN", 0, "root"),
    (3, "und", "KON", 2, "kon"),
    (4, "sah", "VVFIN", 3, "cj"),
    (5, "Maria", "NE", 4, "obja"),
    (6, ".", "$.", 0, "root"),
]

# Die Mitarbeiter warten auf den Zahltag.
PREPOSITIONAL_OBJECT = [
    (1, "Die", "ART", 2, "det"),
    (2, "Mitarbeiter", "NN", 3, "subj"),
    (3, "warten", "VVFIN", 0, "root"),
    (4, "auf", "APPR", 3, "objp"),
    (5, "den", "ART", 6, "det"),
    (6, "Zahltag", "NN", 4, "pn"),
    (7, ".", "$.", 0, "root"),
]

# Den Hund beißt heute wohl noch der Mann.
CASE_AMBIGUITY = [
    (1, "Den", "ART", 2, "det"),
    (2, "Hund", "NN", 3, "subj"),
    (3, "beißt", "VVFIN", 0, "root"),
    (4, "heute", "ADV", 3, "adv"),
    (5, "wohl", "ADV", 3, "adv"),
    (6, "noch", "ADV", 3, "adv"),
    (7, "der", "ART", 8, "det"),
    (8, "Mann", "NN", 3, "subj"),
    (9, ".", "$.", 0, "root"),
]
