"""Search tree stored as a flat arena of nodes addressed by integer id."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .errors import InvariantViolation
from .games import game


@dataclass
class Node:
    id: int
    parent: Optional[int]  # index of the parent node, None for the root
    move: Optional[game.Move]  # move that lead to this node, None for the root
    state: game.GameState
    player: int  # party whose move produced this node; for the root, the searching party
    visits: int = 0
    wins: float = 0.0
    children: List[int] = field(default_factory=list)

    def win_rate(self) -> float:
        if self.visits == 0:
            return 0.0
        return self.wins / self.visits

    def is_terminal(self) -> bool:
        return self.state.is_terminal()


class Tree:
    """Owns every node of one search. Node 0 is the root.

    The root starts with one visit so that ln(N(parent)) is defined from the
    first selection on; every other node starts at zero and is counted by
    backpropagation only.
    """

    ROOT = 0

    def __init__(self, root_state: game.GameState):
        self.nodes: List[Node] = [
            Node(
                id=self.ROOT,
                parent=None,
                move=None,
                state=root_state,
                player=root_state.current_player,
                visits=1,
            )
        ]

    @property
    def root(self) -> Node:
        return self.nodes[self.ROOT]

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, node_id: int) -> Node:
        if not 0 <= node_id < len(self.nodes):
            raise InvariantViolation(f"Unknown node id {node_id}")
        return self.nodes[node_id]

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def add_child(self, parent_id: int, move: game.Move, state: game.GameState) -> int:
        """Append a new child of `parent_id` and return its id."""
        parent = self[parent_id]
        if self.has_child(parent_id, move):
            raise InvariantViolation(f"Node {parent_id} already has a child for {move}")

        child = Node(
            id=len(self.nodes),
            parent=parent_id,
            move=move,
            state=state,
            player=parent.state.current_player,
        )
        self.nodes.append(child)
        parent.children.append(child.id)
        return child.id

    def children(self, node_id: int) -> List[Node]:
        return [self.nodes[child_id] for child_id in self[node_id].children]

    def has_child(self, node_id: int, move: game.Move) -> bool:
        return any(child.move == move for child in self.children(node_id))

    def path_to_root(self, node_id: int) -> List[int]:
        """Ids from `node_id` up to and including the root."""
        path = []
        current: Optional[int] = node_id
        while current is not None:
            node = self[current]
            path.append(current)
            if len(path) > len(self.nodes):
                raise InvariantViolation(f"Parent chain of node {node_id} contains a cycle")
            current = node.parent

        if path[-1] != self.ROOT:
            raise InvariantViolation(f"Node {node_id} has no path to the root")
        return path

    def depth(self, node_id: int) -> int:
        return len(self.path_to_root(node_id)) - 1
