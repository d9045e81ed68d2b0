#!/usr/bin/env python3
"""
Basic walk-through of nodetreelib.

This example demonstrates:
- Building a tree with push() and add()
- Navigation and metrics
- Sorting a traversal
- Encoding to records and parsing them back
"""

import json
import sys
from functools import cmp_to_key
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from nodetreelib import Node, RecordFields, get_tree_stats


def main():
    """Build the five node example tree and exercise it."""
    node0 = Node(0, "zero")
    node1 = Node(1, "one")
    node2 = Node(2, "two")
    node3 = Node(3, "three")
    node4 = Node(4, "four")

    node0.push(node1, node2)
    node2.push(node3, node4)

    print("Pre-order:", [node.id for node in node0])
    print("Leaves:   ", [node.id for node in node0.leaves()])
    print("Lineage of 4:", [node.id for node in node4.lineage()])
    print(f"depth(4)={node4.depth()}  height(0)={node0.height()}  breadth(1)={node1.breadth()}")

    ordered = sorted(node0, key=cmp_to_key(Node.compare()))
    print("By content:", [node.content for node in ordered])

    record = node0.encode()
    print("\nEncoded:")
    print(json.dumps(record, indent=2))

    legacy = node0.encode(fields=RecordFields.legacy())
    copy = Node.parse(legacy, fields=RecordFields.legacy())
    print("\nParsed copy matches:", [n.id for n in copy] == [n.id for n in node0])

    stats = get_tree_stats(node0)
    print("\nTree Summary:")
    print(f"  Nodes: {stats['total_nodes']}")
    print(f"  Leaves: {stats['leaf_nodes']}")
    print(f"  Max depth: {stats['max_depth']}")


if __name__ == "__main__":
    main()
