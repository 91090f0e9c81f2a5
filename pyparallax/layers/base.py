"""Common interface of parallax layers."""

from abc import ABC, abstractmethod


class Layer(ABC):
    """
    A single compositing step.

    Layers are built once from an immutable configuration and applied to a
    canvas in order; ``apply`` mutates the canvas in place.
    """

    #: Value of the ``type`` field selecting this layer kind
    type_name = None

    def __init__(self, config):
        self.config = config

    @abstractmethod
    def apply(self, canvas):
        """Composite this layer onto ``canvas`` (uint8, shape (height, width, 4))."""

    def __repr__(self):
        return f"{type(self).__name__}({self.config!r})"
