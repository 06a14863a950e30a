"""Suffix automaton construction, including the generalised form over several strings."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False, repr=False)
class SAMNode:
    """A state of a suffix automaton."""

    max_len: int = 0
    vtx_id: int = 1
    accept: bool = False
    link: SAMNode | None = None
    children: dict[str, SAMNode] = field(default_factory=dict)
    # string id -> size of the right (end-position) set
    right_size: dict[int, int] = field(default_factory=dict)
    tree_children: list[SAMNode] = field(default_factory=list)

    def clone(self) -> SAMNode:
        """Return a split copy: same transitions, link and length, no id or counts."""
        return SAMNode(
            max_len=self.max_len,
            vtx_id=-1,
            accept=False,
            link=self.link,
            children=dict(self.children),
        )

    def __repr__(self) -> str:
        link = "null" if self.link is None else f"<id={self.link.vtx_id}>"
        edges = "".join(f"{ch}->{child.vtx_id}," for ch, child in self.children.items())
        return (
            f"SAMNode{{ID:{self.vtx_id},max_len:{self.max_len},"
            f"right_size:{self.right_size},link={link},{edges}}}"
        )

    __str__ = __repr__


class SAMPool:
    """Owns the states of a (generalised) suffix automaton."""

    def __init__(self) -> None:
        self.root = SAMNode()
        self.nodes: list[SAMNode] = [self.root]
        self.last = self.root
        self.str_ids: list[int] = []

    def join_string(self, text: str, str_id: int) -> None:
        """Add every character of ``text``, starting again from the root."""
        self.last = self.root
        for char in text:
            self.append(char, str_id)

    def append(self, char: str, str_id: int) -> None:
        """Extend the automaton by one character belonging to string ``str_id``."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        new = SAMNode(
            max_len=self.last.max_len + 1,
            vtx_id=len(self.nodes) + 1,
            accept=True,
            right_size={str_id: 1},
        )
        self.nodes.append(new)

        curr = self.last
        while curr is not None and char not in curr.children:
            curr.children[char] = new
            curr = curr.link

        if curr is None:
            new.link = self.root
        else:
            target = curr.children[char]
            if target.max_len == curr.max_len + 1:
                new.link = target
            else:
                split = target.clone()
                split.vtx_id = len(self.nodes) + 1
                self.nodes.append(split)
                split.max_len = curr.max_len + 1
                new.link = split
                target.link = split
                while curr is not None and curr.children.get(char) is target:
                    curr.children[char] = split
                    curr = curr.link
        self.last = new

    def collect(self) -> None:
        """Build the suffix-link tree and sum right-set sizes up it."""
        for node in self.nodes:
            if node.link is not None:
                node.link.tree_children.append(node)
                for sid in self.str_ids:
                    node.right_size.setdefault(sid, 0)

        order: list[SAMNode] = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            order.append(node)
            stack.extend(node.tree_children)
        for node in reversed(order):
            for child in node.tree_children:
                for sid, size in child.right_size.items():
                    node.right_size[sid] = node.right_size.get(sid, 0) + size

    def generate_graph(self) -> str:
        """Return the automaton as a Graphviz DOT digraph."""
        lines = ["digraph {"]
        self.nodes.sort(key=lambda n: n.vtx_id)
        for node in self.nodes:
            label_lines = [str(node.vtx_id), f"Max={node.max_len}"]
            label_lines.extend(
                f"size{sid}={size}" for sid, size in sorted(node.right_size.items())
            )
            lines.append(f"  {node.vtx_id} [label={_quote(chr(10).join(label_lines))}];")
            if node.link is not None:
                lines.append(f"  {node.vtx_id} -> {node.link.vtx_id} [color=red];")
            for char, child in node.children.items():
                lines.append(f"  {node.vtx_id} -> {child.vtx_id} [label={_quote(char)}];")
        lines.append("}")
        return "\n".join(lines) + "\n"


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'