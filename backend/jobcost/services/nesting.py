"""
Nesting / Layout Calculator

Works out how many copies of an artwork fit across a roll or on a sheet.
This is the single layout routine behind both the print cost estimate and
the bill-of-materials quantity, so the two always agree.

All dimensions are inches except roll usage, which is reported in feet.
"""
import math

from jobcost.schemas.material import Material, MaterialKind
from jobcost.schemas.print_job import Layout


BLEED = 0.25        # added to both artwork dimensions
SPACING = 0.25      # gap between nested pieces
ROLL_BUFFER_FEET = 2.5  # lead-in / waste allowance added to every roll run


class ArtworkDoesNotFitError(Exception):
    """Raised when the artwork exceeds the material in every orientation"""
    pass


def compute_layout(material: Material, art_width: float, art_height: float, quantity: float) -> Layout:
    """
    Nest `quantity` copies of an artwork on a material.

    Args:
        material: ROLL or SHEET material
        art_width: Nominal artwork width (inches, before bleed)
        art_height: Nominal artwork height (inches, before bleed)
        quantity: Number of pieces; callers validate it is positive

    Returns:
        Layout for the material's kind

    Raises:
        ArtworkDoesNotFitError: If no orientation fits the material
    """
    art_width_total = art_width + BLEED
    art_height_total = art_height + BLEED

    if material.kind == MaterialKind.ROLL:
        return _roll_layout(material, art_width_total, art_height_total, quantity)
    return _sheet_layout(material, art_width_total, art_height_total, quantity)


def _roll_layout(material: Material, art_w: float, art_h: float, quantity: float) -> Layout:
    roll_width = material.width

    if art_w > roll_width and art_h > roll_width:
        raise ArtworkDoesNotFitError(
            f"{art_w:g}x{art_h:g} in artwork exceeds {roll_width:g} in roll width "
            f"of '{material.name}' in both orientations"
        )

    portrait_cols = math.floor((roll_width + SPACING) / (art_w + SPACING))
    landscape_cols = math.floor((roll_width + SPACING) / (art_h + SPACING))

    # Portrait wins ties; each row then advances the roll by the artwork height
    if landscape_cols > portrait_cols:
        columns, row_footprint, rotated = landscape_cols, art_w, True
    else:
        columns, row_footprint, rotated = portrait_cols, art_h, False
    columns = max(columns, 1)

    rows = math.ceil(quantity / columns)
    linear_inches = rows * row_footprint + max(rows - 1, 0) * SPACING

    return Layout(
        kind=MaterialKind.ROLL,
        art_width_total=art_w,
        art_height_total=art_h,
        rotated=rotated,
        columns=columns,
        rows=rows,
        linear_feet=linear_inches / 12,
    )


def _sheet_layout(material: Material, art_w: float, art_h: float, quantity: float) -> Layout:
    sheet_w = material.width
    sheet_h = material.height_or_length

    fits_portrait = art_w <= sheet_w and art_h <= sheet_h
    fits_landscape = art_h <= sheet_w and art_w <= sheet_h
    if not (fits_portrait or fits_landscape):
        raise ArtworkDoesNotFitError(
            f"{art_w:g}x{art_h:g} in artwork exceeds {sheet_w:g}x{sheet_h:g} in sheet "
            f"'{material.name}' in both orientations"
        )

    portrait = (
        math.floor((sheet_w + SPACING) / (art_w + SPACING))
        * math.floor((sheet_h + SPACING) / (art_h + SPACING))
    )
    landscape = (
        math.floor((sheet_w + SPACING) / (art_h + SPACING))
        * math.floor((sheet_h + SPACING) / (art_w + SPACING))
    )
    pieces_per_sheet = max(portrait, landscape, 1)

    return Layout(
        kind=MaterialKind.SHEET,
        art_width_total=art_w,
        art_height_total=art_h,
        rotated=landscape > portrait,
        pieces_per_sheet=pieces_per_sheet,
        sheets_needed=math.ceil(quantity / pieces_per_sheet),
    )


def purchase_quantity(layout: Layout) -> float:
    """
    Whole units of material to pull for a layout: sheets, or linear feet of
    roll including the run buffer, rounded up.
    """
    if layout.kind == MaterialKind.ROLL:
        return float(math.ceil(layout.linear_feet + ROLL_BUFFER_FEET))
    return float(layout.sheets_needed)
