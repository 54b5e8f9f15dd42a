"""Edge handling for the electric half-step.

Both policies operate on raw ``(height, width)`` backend arrays with plain
slicing, so they work unchanged on numpy arrays and torch tensors.
"""
from yeewave.const import ABSORBING, REFLECTING


def apply_reflecting(Ez, Ez_prev=None, coefficient=None):
    """Hard truncation: edge cells keep whatever value they already hold."""
    return Ez


def apply_mur(Ez, Ez_prev, coefficient):
    """First-order Mur absorbing boundary on all four edges.

    Each edge cell ``e`` with inward neighbour ``n`` becomes
    ``Ez_prev[n] + coefficient * (Ez[n] - Ez_prev[e])``, where ``Ez`` already
    holds this step's interior update and ``Ez_prev`` is the snapshot taken
    before the magnetic half-step.

    Faces are written in the order a row-by-row, left-to-right sweep would
    reach them. The left face and the bottom and top faces (columns 1 to
    width-2) read the field as it stands after the interior update. The right
    face runs last, so its two corner cells read the bottom and top values
    just written at column width-2. The side faces own the four corners.
    """
    left = Ez_prev[:, 1] + coefficient * (Ez[:, 1] - Ez_prev[:, 0])
    bottom = Ez_prev[-2, 1:-1] + coefficient * (Ez[-2, 1:-1] - Ez_prev[-1, 1:-1])
    top = Ez_prev[1, 1:-1] + coefficient * (Ez[1, 1:-1] - Ez_prev[0, 1:-1])
    Ez[-1, 1:-1] = bottom
    Ez[0, 1:-1] = top

    Ez[:, -1] = Ez_prev[:, -2] + coefficient * (Ez[:, -2] - Ez_prev[:, -1])
    Ez[:, 0] = left
    return Ez


BOUNDARY_HANDLERS = {
    ABSORBING: apply_mur,
    REFLECTING: apply_reflecting,
}


def get_boundary_handler(mode):
    return BOUNDARY_HANDLERS[mode]
