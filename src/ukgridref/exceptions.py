"""Custom exception hierarchy for ukgridref."""


class UKGridRefError(Exception):
    """Base exception for all ukgridref errors."""


class MalformedReference(UKGridRefError, ValueError):
    """The string does not look like a national grid reference."""

    def __init__(self, reference: str):
        self.reference = reference
        super().__init__(f"Badly formatted NGR: '{reference}'")


class UnknownMyriad(UKGridRefError, ValueError):
    """The two letters are not one of the known 100km squares."""

    def __init__(self, reference: str, myriad: str):
        self.reference = reference
        self.myriad = myriad
        super().__init__(f"Unknown myriad '{myriad}' in NGR '{reference}'")


class MismatchedDigitLength(UKGridRefError, ValueError):
    """Easting and northing digit groups have different lengths."""

    def __init__(self, reference: str, easting: str, northing: str):
        self.reference = reference
        self.easting = easting
        self.northing = northing
        super().__init__(
            f"Mismatched NGR '{reference}': easting '{easting}' and "
            f"northing '{northing}' differ in length"
        )


class InvalidDigits(UKGridRefError, ValueError):
    """A digit group holds something other than 1 to 5 decimal digits."""

    def __init__(self, reference: str, axis: str, digits: str):
        self.reference = reference
        self.axis = axis
        self.digits = digits
        super().__init__(
            f"Invalid digits in NGR '{reference}' {axis}: '{digits}'"
        )


class InvalidResolution(UKGridRefError, ValueError):
    """Requested digit resolution is not one of 0, 1, 2, 3, 4 or 5."""

    def __init__(self, resolution: object):
        self.resolution = resolution
        super().__init__(
            f"Digit resolution should be 0, 1, 2, 3, 4 or 5 (not {resolution!r})"
        )


class OutOfExtents(UKGridRefError, ValueError):
    """A coordinate lies outside the myriad table in the named direction."""

    def __init__(self, easting: int, northing: int, direction: str):
        self.easting = easting
        self.northing = northing
        self.direction = direction
        super().__init__(
            f"Coordinate ({easting}, {northing}) is {direction} of the "
            f"grid extents"
        )


class UnknownDatum(UKGridRefError, ValueError):
    """No geodetic transform is registered for the requested datum."""

    def __init__(self, datum: str):
        self.datum = datum
        super().__init__(f"Unknown datum: '{datum}'")


class GeodeticConversionError(UKGridRefError):
    """A grid reference could not be resolved for geodetic conversion.

    The underlying error is chained as ``__cause__``.
    """

    def __init__(self, reference: str):
        self.reference = reference
        super().__init__(f"Could not convert NGR '{reference}' to latitude/longitude")
