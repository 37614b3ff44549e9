from typing import List, Optional, Sequence

from ..model import Graph
from .text import join_poem, tokenize


class BridgeWordPoemGenerator:
    """
    Inserts bridge words between adjacent input words.

    The bridge between ``w1`` and ``w2`` is the label ``b`` maximising
    ``weight(w1 -> b) + weight(b -> w2)``. Candidates are scanned in sorted
    label order and only a strictly greater weight replaces the current best,
    so ties go to the lexicographically smallest label. Input words keep
    their original case; bridges are emitted lower-cased.
    """

    def bridge(self, first: str, second: str, graph: Graph) -> Optional[str]:
        first_targets = graph.targets(first.lower())
        second_label = second.lower()

        best = None
        best_weight = 0
        for candidate in sorted(first_targets):
            onward = graph.weight(candidate, second_label)
            if not onward:
                continue
            path_weight = first_targets[candidate] + onward
            if path_weight > best_weight:
                best, best_weight = candidate, path_weight
        return best

    def generate(self, tokens: Sequence[str], graph: Graph) -> List[str]:
        words = list(tokens)
        if len(words) < 2:
            return words

        output = []
        for first, second in zip(words, words[1:]):
            output.append(first)
            bridge = self.bridge(first, second, graph)
            if bridge is not None:
                output.append(bridge.lower())
        output.append(words[-1])
        return output

    def poem(self, text: str, graph: Graph) -> str:
        return join_poem(self.generate(tokenize(text), graph))
