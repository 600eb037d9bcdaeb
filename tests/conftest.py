"""Shared AD corpus fixtures.

Every block is a small, hand-checked sentence in Floresta AD notation.  The
``Sample`` fixtures pair a block with its expected rule and surface forms so
tests can compare against literal strings.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest


@dataclass(frozen=True)
class Sample:
    block: str
    rule: str
    tagged: str
    np: str


# "A casa é bonita ." -- one NP, no wrappers below the start line.
_CASA = Sample(
    block=(
        "CF1-1 A casa é bonita .\n"
        "STA:fcl\n"
        "=SUBJ:np\n"
        "==>N:art('o' <artd> F S)\ta\n"
        "==H:n('casa' F S)\tcasa\n"
        "=P:v-fin('ser' PR 3S IND VFIN)\té\n"
        "=SC:adj('bonito' F S)\tbonita\n"
        "=.\n"
        "</s>"
    ),
    rule="np[ a_ART casa_N ] é_V-FIN bonita_ADJ .",
    tagged="a_ART casa_N é_V-FIN bonita_ADJ .",
    np="np[ a casa] é bonita .",
)

# "O livro da casa caiu ." -- an NP inside a PP inside an NP.
_LIVRO = Sample(
    block=(
        "CF2-1 O livro da casa caiu .\n"
        "STA:fcl\n"
        "=SUBJ:np\n"
        "==>N:art('o' <artd> M S)\tO\n"
        "==H:n('livro' M S)\tlivro\n"
        "==N<:pp\n"
        "===H:prp('de' <sam->)\tde\n"
        "===P<:np\n"
        "====>N:art('o' <artd> <-sam> F S)\ta\n"
        "====H:n('casa' F S)\tcasa\n"
        "=P:v-fin('cair' PS 3S IND VFIN)\tcaiu\n"
        "=.\n"
        "</s>"
    ),
    rule="np[ O_ART livro_N de_PRP np[ a_ART casa_N ] ] caiu_V-FIN .",
    tagged="O_ART livro_N de_PRP a_ART casa_N caiu_V-FIN .",
    np="np[ O livro de np[ a casa]] caiu .",
)

# Only header lines: no start line, no content.
HEADER_ONLY_BLOCK = "CF3-1 Sem análise .\nSOURCE: CETENFolha n=3"

# A content line without nesting markers.
MALFORMED_BLOCK = "STA:fcl\n=SUBJ:np\nsem marcador\n"

# A content line two levels deeper than its predecessor.
JUMP_BLOCK = "STA:fcl\n=SUBJ:np\n===H:n('casa' F S)\tcasa\n"


def _write_corpus(path: Path, *blocks: str) -> Path:
    path.write_text("\n\n".join(blocks) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def casa() -> Sample:
    return _CASA


@pytest.fixture
def livro() -> Sample:
    return _LIVRO


@pytest.fixture
def header_only_block() -> str:
    return HEADER_ONLY_BLOCK


@pytest.fixture
def malformed_block() -> str:
    return MALFORMED_BLOCK


@pytest.fixture
def jump_block() -> str:
    return JUMP_BLOCK


@pytest.fixture
def write_corpus() -> Callable[..., Path]:
    """Return a writer that stores blocks in a file, separated by blank lines."""
    return _write_corpus


@pytest.fixture
def corpus_file(tmp_path: Path) -> Path:
    """Two distinct sentences plus a duplicate and a header-only block."""
    return _write_corpus(
        tmp_path / "corpus.ad.txt",
        _CASA.block,
        _LIVRO.block,
        _CASA.block,
        HEADER_ONLY_BLOCK,
    )


@pytest.fixture
def malformed_file(tmp_path: Path) -> Path:
    return _write_corpus(tmp_path / "malformed.ad.txt", _CASA.block, MALFORMED_BLOCK)
