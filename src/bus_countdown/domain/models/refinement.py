"""Names of the refinement strategies a request can be narrowed with."""

FIXED_POINT = "fixed_point"
SINGLE_PASS = "single_pass"
REFINEMENT_MODES: tuple[str, ...] = (FIXED_POINT, SINGLE_PASS)
