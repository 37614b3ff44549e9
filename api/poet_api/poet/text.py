# Tokenizing and joining helpers shared by the datasource and the generator

from typing import Iterable, Iterator, List, Sequence


def tokenize(text: str) -> List[str]:
    # str.split() with no separator splits on whitespace runs and drops empty fragments
    return text.split()


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def join_poem(tokens: Sequence[str]) -> str:
    return " ".join(tokens)
