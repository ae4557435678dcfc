import numpy as np
from sklearn.neighbors import KDTree


class NearestNeighbors():
    """
    Incrementally growing nearest neighbor structure over D-dimensional points.

    With model_type "linear" every query scans all stored points. With model_type "KDTree" the points are
    indexed by a scikit-learn KDTree that is refit once refit_threshold points have been appended since the
    last fit; points not yet indexed are scanned linearly. Both models return the same answer: the index of
    the closest point, the lowest index winning ties.

    Args:
        dim (int): Dimension D of the stored points.
        model_type (str, optional): "linear" or "KDTree". Defaults to "linear".
        refit_threshold (int, optional): Number of unindexed points that triggers a KDTree refit. Defaults to 32.
        model_kwargs (dict, optional): Keyword args passed to the KDTree. Defaults to None.
    """

    def __init__(self, dim, model_type="linear", refit_threshold=32, model_kwargs=None):
        self.available_models = ['linear', 'KDTree']
        if model_type not in self.available_models:
            raise ValueError(
                "{} is not a valid value for model_type. Must be one of {}".format(model_type, self.available_models))
        if refit_threshold < 1:
            raise ValueError("refit_threshold must be at least 1.")
        self.model_type = model_type
        self.dim = dim
        self.refit_threshold = refit_threshold
        self.model_kwargs = model_kwargs if model_kwargs is not None else {}
        self.model = None
        self.n_fitted = 0
        self._X = np.empty((16, dim), dtype=float)
        self._n = 0

    def __len__(self):
        return self._n

    @property
    def X(self):
        return self._X[:self._n]

    def fit(self):
        """
        Fits the KDTree on all points stored so far. No-op for the linear model.
        """
        if self.model_type == "KDTree" and self._n > 0:
            self.model = KDTree(self.X.copy(), **self.model_kwargs)
            self.n_fitted = self._n

    def append(self, x):
        """
        Adds x to the dataset.

        Args:
            x (array-like): 1xD vector.
        """
        if self._n == self._X.shape[0]:
            self._X = np.concatenate((self._X, np.empty_like(self._X)), axis=0)
        self._X[self._n] = x
        self._n += 1
        if self.model_type == "KDTree" and self._n - self.n_fitted >= self.refit_threshold:
            self.fit()

    def nearest(self, x):
        """
        Index of the stored point closest to x in Euclidean distance. Ties go to the lowest index.

        Args:
            x (array-like): 1xD query vector.

        Returns:
            int: Index of the nearest point.
        """
        if self._n == 0:
            raise ValueError("Cannot query an empty NearestNeighbors structure.")
        x = np.asarray(x, dtype=float)
        best_idx = None
        best_sq = np.inf
        tail_start = 0
        if self.model is not None:
            dist, _ = self.model.query([x], k=1)
            # every indexed point tied with the KDTree answer, so the lowest index can be chosen
            radius = dist[0][0] * (1 + 1e-9) + 1e-12
            candidates = np.sort(self.model.query_radius([x], r=radius)[0])
            sq = np.sum((self._X[candidates] - x) ** 2, axis=1)
            j = int(np.argmin(sq))
            best_idx, best_sq = int(candidates[j]), sq[j]
            tail_start = self.n_fitted
        if tail_start < self._n:
            sq = np.sum((self._X[tail_start:self._n] - x) ** 2, axis=1)
            j = int(np.argmin(sq))
            if best_idx is None or sq[j] < best_sq:
                best_idx = tail_start + j
        return best_idx
