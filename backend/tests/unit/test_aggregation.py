"""
Unit tests for the aggregation layer

Breakdown totals must not depend on how items are grouped or ordered, and
bill-of-materials lines merge by exact description.
"""
import pytest

from jobcost.schemas.apparel_job import ApparelCostBreakdown
from jobcost.schemas.print_job import PrintCostBreakdown
from jobcost.schemas.report import LineItem
from jobcost.services.aggregation import aggregate, merge_line_items


@pytest.fixture
def breakdowns():
    return [
        PrintCostBreakdown(material_cost=10.5, ink_cost=1.25, operator_cost=7),
        PrintCostBreakdown(material_cost=4, lamination_cost=2, design_cost=15),
        PrintCostBreakdown(cutting_cost=3.5, equipment_cost=0.75, ink_cost=0.5),
    ]


class TestAggregate:
    """Test field-by-field summing of breakdowns"""

    def test_sums_each_field(self, breakdowns):
        """Test each field is the sum over inputs"""
        total = aggregate(breakdowns)

        assert isinstance(total, PrintCostBreakdown)
        assert total.material_cost == pytest.approx(14.5)
        assert total.ink_cost == pytest.approx(1.75)
        assert total.design_cost == pytest.approx(15)
        assert total.total == pytest.approx(sum(b.total for b in breakdowns))

    def test_grouping_does_not_matter(self, breakdowns):
        """Test aggregating partial sums equals aggregating everything"""
        whole = aggregate(breakdowns)
        grouped = aggregate([aggregate(breakdowns[:2]), aggregate(breakdowns[2:])])

        for name in PrintCostBreakdown.cost_fields():
            assert getattr(grouped, name) == pytest.approx(getattr(whole, name))

    def test_order_does_not_matter(self, breakdowns):
        """Test reversing the input gives the same totals"""
        forward = aggregate(breakdowns)
        backward = aggregate(list(reversed(breakdowns)))

        for name in PrintCostBreakdown.cost_fields():
            assert getattr(backward, name) == pytest.approx(getattr(forward, name))

    def test_empty_with_type_is_zero(self):
        """Test an empty category aggregates to zeros"""
        total = aggregate([], ApparelCostBreakdown)

        assert total == ApparelCostBreakdown()

    def test_empty_without_type_raises(self):
        """Test an empty input needs the breakdown type"""
        with pytest.raises(ValueError):
            aggregate([])

    def test_mixed_categories_rejected(self, breakdowns):
        """Test print and apparel breakdowns cannot be folded together"""
        with pytest.raises(TypeError):
            aggregate([*breakdowns, ApparelCostBreakdown(garment_total=1)])


class TestMergeLineItems:
    """Test merging bill-of-materials lines"""

    def test_merges_by_description(self):
        """Test duplicate descriptions sum their quantities"""
        merged = merge_line_items([
            LineItem(description="Cast Vinyl", quantity=5, unit_of_measure="Linear Feet", vendor="Grimco"),
            LineItem(description="PVC", quantity=2, unit_of_measure="Sheets"),
            LineItem(description="Cast Vinyl", quantity=7, unit_of_measure="Linear Feet", vendor="Grimco"),
        ])

        assert [item.description for item in merged] == ["Cast Vinyl", "PVC"]
        assert merged[0].quantity == 12
        assert merged[1].quantity == 2

    def test_first_occurrence_keeps_attributes(self):
        """Test vendor, unit and status come from the first line seen"""
        merged = merge_line_items([
            LineItem(description="Hinge", quantity=2, unit_of_measure="Each", vendor="McMaster", status="Ordered"),
            LineItem(description="Hinge", quantity=3, unit_of_measure="Box", vendor="Amazon", status="Pending"),
        ])

        assert len(merged) == 1
        assert merged[0].quantity == 5
        assert merged[0].vendor == "McMaster"
        assert merged[0].unit_of_measure == "Each"
        assert merged[0].status == "Ordered"

    def test_description_match_is_exact(self):
        """Test case differences are separate lines"""
        merged = merge_line_items([
            LineItem(description="PVC", quantity=1),
            LineItem(description="pvc", quantity=1),
        ])

        assert len(merged) == 2

    def test_inputs_not_mutated(self):
        """Test merging leaves the input items untouched"""
        first = LineItem(description="PVC", quantity=1)
        merge_line_items([first, LineItem(description="PVC", quantity=4)])

        assert first.quantity == 1
