"""
Interfaces for state validity checking.
"""

__all__ = ['StateValidityChecker']


class StateValidityChecker():

    """
    Combines a collision checking function, a self collision checking function, and a list of other
    validity functions (constraints, bounds etc.) into a single free space predicate. Each function
    takes a configuration and returns True when it is valid.

    Attributes:
        col_func (func): External collisions between the moving object and the environment.
        self_col_func (func): Self-collision checking function.
        validity_funcs (list): List of other state validating functions.
    """

    def __init__(self, self_col_func=None, col_func=None, validity_funcs=None):
        if self_col_func is None and col_func is None and not validity_funcs:
            raise ValueError("State Validity Checking cannot be performed if no validity functions of any kind are given.")
        self.self_col_func = self_col_func
        self.col_func = col_func
        self.validity_funcs = list(validity_funcs) if validity_funcs is not None else []

    def validate(self, sample):
        """
        Validates a given sample. Cheap validity functions are expected first, so they run before the
        collision functions.

        Args:
            sample (array-like): The sample to validate.

        Returns:
            bool: Whether or not the sample is valid.
        """
        for func in self.validity_funcs:
            if not func(sample):
                return False
        if self.self_col_func is not None and not self.self_col_func(sample):
            return False
        if self.col_func is not None and not self.col_func(sample):
            return False
        return True
