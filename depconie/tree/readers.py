# depconie/tree/readers.py
"""
Построение DependencyParseTree из внешних представлений разбора.

Поддерживаются два формата:
  * CoNLL (вывод ParZu) - через библиотеку conllu;
  * скобочная запись, где каждый узел имеет вид
        (ID:FEATURE-LABEL[\\/SUFFIX] [TOKEN] child*)
    С TOKEN узел - терминал (FEATURE = тег STTS), без него - нетерминал.
    ID необязателен; если его нет, id раздаются в прямом порядке обхода, начиная с 1.
    У терминала с зависимыми и у самих зависимых id обязателен: иначе порядок
    id не совпал бы с порядком слов.
    Скобки в токене и в теге записываются как -LRB- / -RRB-; тег $( можно писать и как есть.
"""
import logging
import re
from typing import List, Optional

from conllu import parse
from conllu.models import TokenList

from depconie import labels
from depconie.core.errors import MalformedNodeError
from depconie.tree.node import InnerData, LeafData, pos_group_for
from depconie.tree.parse_tree import DependencyParseTree, NodeEntry

logger = logging.getLogger(__name__)

_BRACKET_TOKENS = re.compile(r"(?:\$\(|[^\s()])+|\(|\)")
_EXPLICIT_ID = re.compile(r"^(\d+):(.*)$")
_ESCAPES = {"-LRB-": "(", "-RRB-": ")"}
_ESCAPE_PATTERN = re.compile("|".join(re.escape(e) for e in _ESCAPES))


def _unescape(text: str) -> str:
    return _ESCAPE_PATTERN.sub(lambda m: _ESCAPES[m.group(0)], text)


# ============================================================
# Скобочная запись
# ============================================================

class _BracketReader:
    def __init__(self, text: str):
        self.tokens = _BRACKET_TOKENS.findall(text)
        self.pos = 0
        self.next_id = 1
        self.entries: List[NodeEntry] = []

    def _peek(self) -> Optional[str]:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def _take(self) -> str:
        token = self._peek()
        if token is None:
            raise MalformedNodeError("Unexpected end of input, unbalanced brackets")
        self.pos += 1
        return token

    def read(self) -> List[NodeEntry]:
        if self._peek() is None:
            raise MalformedNodeError("Empty tree")
        self._read_node(head_id=None)
        if self._peek() is not None:
            raise MalformedNodeError("Trailing input after the root node", " ".join(self.tokens[self.pos:]))
        return self.entries

    def _read_node(self, head_id: Optional[int], head_is_token: bool = False) -> int:
        if self._take() != "(":
            raise MalformedNodeError("Node must start with '('", self.tokens[self.pos - 1])

        data = self._take()
        if data in ("(", ")"):
            raise MalformedNodeError("Node without data", data)

        match = _EXPLICIT_ID.match(data)
        if match:
            node_id, data = int(match.group(1)), match.group(2)
        elif head_is_token:
            raise MalformedNodeError("Dependent of a token needs an explicit id", data)
        else:
            node_id = self.next_id
        self.next_id = max(self.next_id, node_id + 1)

        inner = InnerData.parse(_unescape(data))

        # Необязательная словоформа сразу после данных узла
        token = None
        if self._peek() not in ("(", ")", None):
            token = _unescape(self._take())

        if token is None:
            node_data = inner
        else:
            if self._peek() == "(" and not match:
                raise MalformedNodeError("Token with dependents needs an explicit id", data)
            node_data = LeafData(token=token, pos=inner.feature, pos_group=pos_group_for(inner.feature))
        self.entries.append((node_id, node_data, inner.label, head_id))

        while self._peek() == "(":
            self._read_node(head_id=node_id, head_is_token=token is not None)

        if self._take() != ")":
            raise MalformedNodeError("Node must end with ')'", data)
        return node_id


def read_bracketed(text: str, sent_id: Optional[str] = None) -> DependencyParseTree:
    """Разбирает дерево в скобочной записи."""
    entries = _BracketReader(text).read()
    return DependencyParseTree.build(entries, sent_id=sent_id)


# ============================================================
# CoNLL (ParZu)
# ============================================================

def _is_punctuation(token) -> bool:
    tag = token.get("xpos") or token.get("upos") or ""
    return token.get("deprel") in (labels.PUNCTUATION, "-PUNCT-") or tag.startswith("$")


def from_token_list(token_list: TokenList) -> DependencyParseTree:
    """
    Переводит предложение conllu в дерево.

    У ParZu к 0 подвешены не только вершина, но и знаки препинания.
    Если непунктуационная вершина одна, она становится корнем и забирает остальные;
    если их несколько, над ними строится виртуальный корень с id 0.
    """
    sent_id = token_list.metadata.get("sent_id")
    # Пропуск мульти-словных токенов (1-2) и пустых узлов (1.1)
    tokens = [t for t in token_list if isinstance(t["id"], int)]
    if not tokens:
        raise MalformedNodeError("Sentence without tokens", str(sent_id))

    for t in tokens:
        if t["head"] is None:
            raise MalformedNodeError(f"Token {t['id']} has no head", t["form"])

    top = [t for t in tokens if t["head"] == 0]
    if not top:
        raise MalformedNodeError("Sentence has no root token (cycle)", str(sent_id))

    content_roots = [t for t in top if not _is_punctuation(t)]
    virtual_root = len(content_roots) > 1
    main_root = None if virtual_root else (content_roots or top)[0]

    entries: List[NodeEntry] = []
    if virtual_root:
        logger.debug(f"Sentence {sent_id}: {len(content_roots)} roots, adding virtual root")
        entries.append((labels.VIRTUAL_ROOT_ID, InnerData.parse(labels.VIRTUAL_ROOT_DATA),
                        labels.ROOT, None))

    for t in tokens:
        if t["id"] == labels.VIRTUAL_ROOT_ID:
            raise MalformedNodeError("Token id 0 is reserved", t["form"])

        pos = t.get("xpos") or t.get("upos") or "_"
        if t.get("xpos"):
            pos_group = pos_group_for(t["xpos"])
        else:
            pos_group = t.get("upos") or "_"

        data = LeafData(token=t["form"], pos=pos, pos_group=pos_group)

        if t["head"] != 0:
            head_id = t["head"]
        elif virtual_root:
            head_id = labels.VIRTUAL_ROOT_ID
        elif t is main_root:
            head_id = None
        else:
            head_id = main_root["id"]

        entries.append((t["id"], data, t.get("deprel") or "_", head_id))

    return DependencyParseTree.build(entries, sent_id=sent_id, text=token_list.metadata.get("text"))


def read_conllu(text: str) -> List[DependencyParseTree]:
    """Разбирает все предложения CoNLL-текста. Первое некорректное предложение прерывает разбор."""
    return [from_token_list(sentence) for sentence in parse(text)]
