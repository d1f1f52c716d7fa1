import enum
from typing import Dict, Generic, List, Optional, Sequence, Set, Tuple, TypeVar


T = TypeVar("T")


settings = {
    'preview_limit': 10,  # values shown for a cyclic list
}


class LinkedListNode(Generic[T]):
    def __init__(self, data: T, next: "Optional[LinkedListNode[T]]"):
        self.data = data
        self.next = next

    @staticmethod
    def from_list(ls: List[T]):
        cur: "Optional[LinkedListNode[T]]" = None
        for i in range(len(ls)-1, -1, -1):
            cur = LinkedListNode(ls[i], cur)
        return cur

    @staticmethod
    def to_list(ll: "Optional[LinkedListNode[T]]"):
        '''only for acyclic list, otherwise it never returns'''
        ls: List[T] = []
        cur = ll
        while cur is not None:
            ls.append(cur.data)
            cur = cur.next
        return ls


class CycleKind(enum.Enum):
    NONE = enum.auto()
    CROSSING = enum.auto()
    SAME_PARITY = enum.auto()


def is_even(idx: int):
    return idx % 2 == 0


def split_and_reverse(head: Optional[LinkedListNode[T]]) -> Tuple[Optional[LinkedListNode[T]], Optional[LinkedListNode[T]]]:
    '''
    rewire a linked list in place into two reversed linked lists
    the first holds nodes at odd positions, the second nodes at even positions
    return (odd_head, even_head), the original chain is destroyed

    position is the order of first visit, starting from 0
    nodes are keyed by id() since only identity matters, not payload

    a back edge from the last node to an earlier node is a cycle:
    if the two ends have different parity, keeping it would join both lists,
    so the walk stops there and the cycle is gone
    if they have the same parity, the walk re-enters the earlier node with its recorded position,
    linking it on top of its own list closes the loop within that list;
    from there each saved next is the previous node of the same parity,
    so the walk goes down an already reversed chain until None

    every node is visited once, plus at most one re-entry, so it's O(n) time and space
    '''
    positions: Dict[int, int] = {}
    odd_head: Optional[LinkedListNode[T]] = None
    even_head: Optional[LinkedListNode[T]] = None

    cur = head
    cur_idx = 0
    while cur is not None:
        positions[id(cur)] = cur_idx
        next_node = cur.next
        if is_even(cur_idx):
            cur.next = even_head
            even_head = cur
        else:
            cur.next = odd_head
            odd_head = cur

        if next_node is None:
            cur = None
        elif id(next_node) not in positions:
            cur = next_node
            cur_idx += 1
        else:
            next_idx = positions[id(next_node)]
            if is_even(next_idx) != is_even(cur_idx):
                # crossing cycle, break it
                cur = None
            else:
                cur = next_node
                cur_idx = next_idx
    return odd_head, even_head


def make_linked_list(n: int, k: Optional[int] = None):
    '''
    make a linked list of n nodes, with data 0 to n-1
    if n is 0, return None
    if k is None, then this is a simple linked list
    if k is an integer, then it's cyclic and the final node point to k-th node
    '''
    assert n >= 0
    assert k is None or (k >= 0 and k < n)
    if n == 0:
        return None
    ll = [LinkedListNode(i, None) for i in range(n)]
    for i in range(n-1):
        ll[i].next = ll[i+1]
    ll[n-1].next = None if k is None else ll[k]
    return ll[0]


def nth_node(head: Optional[LinkedListNode[T]], i: int):
    assert i >= 0
    cur = head
    for _ in range(i):
        if cur is None:
            return None
        cur = cur.next
    return cur


def safe_get(seq: Sequence[T], i: int) -> Optional[T]:
    '''element at index i if it is within bounds, otherwise None'''
    if 0 <= i < len(seq):
        return seq[i]
    return None


def take_values(head: Optional[LinkedListNode[T]], limit: int):
    '''data of at most limit nodes, works on cyclic list'''
    values: List[T] = []
    cur = head
    while cur is not None and len(values) < limit:
        values.append(cur.data)
        cur = cur.next
    return values


def count_distinct(*heads: Optional[LinkedListNode[T]]):
    '''number of distinct nodes reachable from any head, by identity'''
    seen: Set[int] = set()
    for head in heads:
        cur = head
        while cur is not None and id(cur) not in seen:
            seen.add(id(cur))
            cur = cur.next
    return len(seen)


def cycle_detect(head: Optional[LinkedListNode[T]]):
    '''
    Floyd's hare and tortoise algorithm for cycle detection
    head is the start of a linked list
    if cyclic, return the start of cycle node
    if acyclic, return None

    assuming the first x nodes are linear, then followed by a cycle with y nodes
    then hare will chase tortoise at round ceil(x/y)*y
    because now both hare and tortoise has entered the cycle
    and their step difference is a multiple of y

    after that, the tortoise just need to move another x steps to find start of cycle
    because ceil(x/y)*y+x is at the position of the start of cycle
    '''
    if not (head and head.next):
        return None
    hare: Optional[LinkedListNode[T]] = head.next.next
    tortoise: Optional[LinkedListNode[T]] = head.next
    # start chasing
    while hare is not tortoise:
        if not (hare and hare.next):
            return None
        hare = hare.next.next
        assert tortoise
        tortoise = tortoise.next
    # find start of cycle
    hare = head
    while hare is not tortoise:
        assert hare
        assert tortoise
        hare = hare.next
        tortoise = tortoise.next
    return hare


def classify_cycle(head: Optional[LinkedListNode[T]]):
    '''
    tell what split_and_reverse will do with the list, without modifying it
    the cycle start is at position x, the cycle has y nodes,
    so the back edge goes from position x+y-1 to position x
    both ends have the same parity iff y is odd
    '''
    start = cycle_detect(head)
    if start is None:
        return CycleKind.NONE
    x = 0
    cur = head
    while cur is not start:
        assert cur
        cur = cur.next
        x += 1
    y = 1
    cur = start.next
    while cur is not start:
        assert cur
        cur = cur.next
        y += 1
    if is_even(x) == is_even(x+y-1):
        return CycleKind.SAME_PARITY
    return CycleKind.CROSSING


def stringify_linked_list(n: int, k: Optional[int] = None):
    ll_str = '->'.join([str(i) for i in range(n)])
    if k is not None:
        ll_str += ('->' + str(k))
    return ll_str


def stringify_values(head: Optional[LinkedListNode[T]]):
    if cycle_detect(head) is None:
        return str(LinkedListNode.to_list(head))
    values = take_values(head, settings['preview_limit'])
    return '[%s, ...]' % ', '.join([str(v) for v in values])


def test_one(n: int, k: Optional[int], odd_exp: List[int], even_exp: List[int], cyclic: str = ''):
    '''
    cyclic is '', 'odd' or 'even', telling which output should keep a cycle
    for a cyclic output, expected values are a prefix of the endless traversal
    '''
    head = make_linked_list(n, k)
    kind = classify_cycle(head)
    odd_head, even_head = split_and_reverse(head)
    # print result
    print('%s: odd=%s even=%s' % (stringify_linked_list(n, k),
          stringify_values(odd_head), stringify_values(even_head)))
    # check result
    if cyclic == 'odd':
        assert kind == CycleKind.SAME_PARITY
        assert cycle_detect(odd_head) is not None
        assert take_values(odd_head, len(odd_exp)) == odd_exp
    else:
        assert cycle_detect(odd_head) is None
        assert LinkedListNode.to_list(odd_head) == odd_exp
    if cyclic == 'even':
        assert kind == CycleKind.SAME_PARITY
        assert cycle_detect(even_head) is not None
        assert take_values(even_head, len(even_exp)) == even_exp
    else:
        assert cycle_detect(even_head) is None
        assert LinkedListNode.to_list(even_head) == even_exp
    if k is not None and cyclic == '':
        assert kind == CycleKind.CROSSING
    assert count_distinct(odd_head, even_head) == n


def test_acyclic():
    test_one(0, None, [], [])
    test_one(1, None, [], [0])
    test_one(2, None, [1], [0])
    test_one(5, None, [3, 1], [4, 2, 0])
    for n in range(12):
        odd_exp = list(range(n-1, 0, -2)) if n % 2 == 0 else list(range(n-2, 0, -2))
        even_exp = list(range(n-2, -1, -2)) if n % 2 == 0 else list(range(n-1, -1, -2))
        assert len(odd_exp) == n // 2
        assert len(even_exp) == (n+1) // 2
        test_one(n, None, odd_exp, even_exp)


def test_single_node():
    head = make_linked_list(1)
    odd_head, even_head = split_and_reverse(head)
    assert odd_head is None
    assert even_head is head
    assert even_head is not None and even_head.next is None


def test_cycle_preserving():
    # last node points back to node 1, both odd
    test_one(4, 1, [1, 3, 1, 3, 1], [2, 0], cyclic='odd')
    # self loop on the last node
    test_one(1, 0, [], [0, 0, 0], cyclic='even')
    test_one(2, 1, [1, 1, 1], [0], cyclic='odd')
    test_one(7, 0, [5, 3, 1], [0, 6, 4, 2, 0, 6, 4, 2], cyclic='even')
    test_one(7, 2, [5, 3, 1], [0, 2, 6, 4, 2, 6, 4, 2], cyclic='even')
    test_one(7, 4, [5, 3, 1], [0, 2, 4, 6, 4, 6, 4, 6], cyclic='even')
    test_one(7, 6, [5, 3, 1], [0, 2, 4, 6, 6, 6], cyclic='even')
    test_one(8, 3, [1, 3, 7, 5, 3, 7, 5], [6, 4, 2, 0], cyclic='odd')


def test_cycle_breaking():
    # last node points back to node 2, odd to even
    test_one(4, 2, [3, 1], [2, 0])
    test_one(2, 0, [1], [0])
    test_one(7, 1, [5, 3, 1], [6, 4, 2, 0])
    test_one(7, 3, [5, 3, 1], [6, 4, 2, 0])
    test_one(7, 5, [5, 3, 1], [6, 4, 2, 0])


def test_classify():
    n = 7
    assert classify_cycle(None) == CycleKind.NONE
    assert classify_cycle(make_linked_list(n)) == CycleKind.NONE
    for k in range(n):
        head = make_linked_list(n, k)
        kind = classify_cycle(head)
        assert head is not None and head.data == 0  # not modified
        odd_head, even_head = split_and_reverse(head)
        has_cycle = cycle_detect(odd_head) is not None or cycle_detect(even_head) is not None
        assert has_cycle == (kind == CycleKind.SAME_PARITY)
        assert count_distinct(odd_head, even_head) == n


def test_identity():
    # equal payloads must not be confused
    head = LinkedListNode.from_list(['a', 'a', 'a', 'a'])
    nodes = [nth_node(head, i) for i in range(4)]
    odd_head, even_head = split_and_reverse(head)
    assert odd_head is nodes[3] and odd_head.next is nodes[1]
    assert even_head is nodes[2] and even_head.next is nodes[0]
    assert count_distinct(odd_head, even_head) == 4
    # back edge to a node whose payload equals many others
    head = LinkedListNode.from_list([None, None, None, None])
    last = nth_node(head, 3)
    assert last is not None
    last.next = nth_node(head, 1)
    odd_head, even_head = split_and_reverse(head)
    assert cycle_detect(odd_head) is not None
    assert cycle_detect(even_head) is None
    assert count_distinct(odd_head, even_head) == 4


def test_helpers():
    heads = split_and_reverse(make_linked_list(3))
    assert safe_get(heads, 0) is heads[0]
    assert safe_get(heads, 2) is None
    assert safe_get(heads, -1) is None
    assert safe_get([], 0) is None
    assert nth_node(make_linked_list(2), 5) is None
    assert stringify_linked_list(4, 1) == '0->1->2->3->1'
    assert stringify_values(None) == '[]'
    odd_head, _ = split_and_reverse(make_linked_list(4, 1))
    preview = ', '.join(['1', '3'] * (settings['preview_limit'] // 2))
    assert stringify_values(odd_head) == '[%s, ...]' % preview
    assert take_values(make_linked_list(3), 10) == [0, 1, 2]


def test():
    test_acyclic()
    test_single_node()
    test_cycle_preserving()
    test_cycle_breaking()
    test_classify()
    test_identity()
    test_helpers()


if __name__ == '__main__':
    test()
