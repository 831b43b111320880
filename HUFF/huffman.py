from collections import deque

class Node:
    def __init__(self, sym=None, freq=0, left=None, right=None):
        self.sym = sym
        self.freq = freq
        self.left = left
        self.right = right
        self.code = None  # None until traversal reaches this node

    @property
    def is_leaf(self):
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf:
            return f"Node(sym={self.sym}, freq={self.freq}, code={self.code!r})"
        return f"Node(freq={self.freq}, code={self.code!r})"

def merge(left: Node, right: Node) -> Node:
    # frequency is fixed at merge time
    return Node(freq=left.freq + right.freq, left=left, right=right)

def make_leaves(freqs):
    """One leaf per symbol value, indexed by symbol."""
    return [Node(sym=s, freq=int(f)) for s, f in enumerate(freqs)]

def sort_leaves(leaves):
    # sorted() is stable, so ties keep symbol order
    return sorted(leaves, key=lambda n: n.freq)

def build_tree(nodes) -> Node:
    """
    Merge the two front nodes and append the result to the back until one
    node is left. The queue is sorted once by the caller and never again, so
    later merges are not guaranteed to pick the two smallest frequencies.
    A zero-frequency node at the front is dropped instead of merged.

    Empty input leaves a single zero-frequency leaf as the root; a single
    occurring symbol leaves that symbol's leaf as the root.
    """
    q = deque(nodes)
    if not q:
        raise ValueError("cannot build a tree from an empty node collection")
    while len(q) > 1:
        if q[0].freq == 0:
            q.popleft()
            continue
        a = q.popleft()
        b = q.popleft()
        q.append(merge(a, b))
    return q.popleft()

def assign_codes(root: Node) -> Node:
    """
    Depth-first code assignment: left child gets parent code + "0",
    right child gets parent code + "1".
    A childless root keeps code=None (there is no edge to label).
    """
    if root.is_leaf:
        return root
    root.code = ""
    stack = [root]
    while stack:
        node = stack.pop()
        # push right first so the left subtree is visited first
        if node.right is not None:
            node.right.code = node.code + "1"
            stack.append(node.right)
        if node.left is not None:
            node.left.code = node.code + "0"
            stack.append(node.left)
    return root

def build_codebook(leaves):
    return {n.sym: n.code for n in leaves if n.code is not None}

def build_code_table(freqs):
    """
    Full pipeline on a frequency table.
    Returns:
      leaves: list of 256 leaves (indexed by symbol), codes assigned
      root: tree root
    """
    leaves = make_leaves(freqs)
    root = assign_codes(build_tree(sort_leaves(leaves)))
    return leaves, root

def tree_depth(root: Node) -> int:
    depth = 0
    stack = [(root, 0)]
    while stack:
        node, d = stack.pop()
        depth = max(depth, d)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, d + 1))
    return depth

def is_prefix_free(codes) -> bool:
    # after sorting, a prefix sorts directly before some code it prefixes
    words = sorted(codes.values())
    return all(not b.startswith(a) for a, b in zip(words, words[1:]))
