class SubdivisionPathIterator():
    """
    An iterator that produces the subdivision selection of elements, so that the midpoint of every
    remaining segment is visited before its halves.

    a b c d e f g h i j k -> f c i b e h k a d g j
    """

    def __init__(self, local_path):
        self.segment_queue = [local_path]

    def __iter__(self):
        return self

    def __next__(self):
        if len(self.segment_queue) == 0:
            raise StopIteration
        segment = self.segment_queue.pop(0)
        m_idx = len(segment) // 2
        s1 = segment[:m_idx]
        s2 = segment[m_idx + 1:]
        if len(s1) > 0:
            self.segment_queue.append(s1)
        if len(s2) > 0:
            self.segment_queue.append(s2)
        return segment[m_idx]


def subdivision_evaluate(eval_fn, local_path):
    """
    Evaluates subdivisions of a discrete local path i.e. 5-3-7-2-4-6-8-1. Failures in the middle of a
    segment tend to be found before failures near its ends.

    Args:
        eval_fn (callable): Returns True for points that pass.
        local_path (array-like): Points to evaluate.

    Returns:
        bool: Whether every point passed.
    """
    for point in SubdivisionPathIterator(local_path):
        if not eval_fn(point):
            return False
    return True
