"""Composite demonstration: a file system tree of files and directories.

Files are leaves, directories own an ordered list of children. Both render
themselves as a dash-indented listing, directories recursing into their
children with a deeper indent.

.. note::
    The tree must stay acyclic. Adding a directory to itself or to one of
    its descendants is not detected and makes :meth:`FileSystemNode.display`
    recurse without end. Keeping the tree acyclic is the caller's job.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

LOGGER = logging.getLogger(__name__)

INDENT_MARKER = "-"
DEPTH_STEP = 2


@dataclass
class FileSystemNode(ABC):
    """A node of the file system tree.

    :param name: Name shown in the listing
    """

    name: str

    def _line(self, depth: int) -> str:
        return INDENT_MARKER * depth + self.name

    @abstractmethod
    def render(self, depth: int) -> list[str]:
        """Build the listing of this node and everything below it.

        :param depth: Number of markers prefixing this node's own line
        :return: The listing, one entry per line, parents before children
        """

    def display(self, depth: int) -> None:
        """Print the listing produced by :meth:`render`.

        :param depth: Number of markers prefixing this node's own line
        """
        for line in self.render(depth):
            print(line)


@dataclass
class FileNode(FileSystemNode):
    """A leaf of the tree."""

    def render(self, depth: int) -> list[str]:
        return [self._line(depth)]


@dataclass
class DirectoryNode(FileSystemNode):
    """A container of files and directories.

    :param name: Name shown in the listing
    :param children: Child nodes in insertion order, owned by this directory
    """

    children: list[FileSystemNode] = field(default_factory=list)

    def add(self, node: FileSystemNode) -> None:
        """Append a node to the end of this directory's children.

        No duplicate or cycle detection is done.

        :param node: The node to take ownership of
        """
        LOGGER.debug("Adding %s to directory %s", node.name, self.name)
        self.children.append(node)

    def render(self, depth: int) -> list[str]:
        lines = [self._line(depth)]
        for child in self.children:
            lines.extend(child.render(depth + DEPTH_STEP))
        return lines


def build_sample_tree() -> DirectoryNode:
    """Build the fixed tree used by the demonstration.

    :return: The ``Root`` directory
    """
    root = DirectoryNode("Root")

    documents = DirectoryNode("Documents")
    documents.add(FileNode("Resume.docx"))
    documents.add(FileNode("Report.pdf"))

    images = DirectoryNode("Images")
    images.add(FileNode("photo1.jpg"))
    images.add(FileNode("logo.png"))

    root.add(documents)
    root.add(images)
    root.add(FileNode("README.txt"))
    return root
