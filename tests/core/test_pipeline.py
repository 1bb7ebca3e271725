import math

import pytest

from unitpipe.core.pipeline import IDENTITY, ConversionPipeline, ElementaryOperation, PipelineBuilder


def test_elementary_add_and_inverse():
    op = ElementaryOperation.add(273.15)
    assert op.apply(0) == pytest.approx(273.15)
    assert op.unapply(273.15) == pytest.approx(0)
    assert op.inverse.apply(273.15) == pytest.approx(0)

def test_subtract_is_inverse_of_add():
    op = ElementaryOperation.subtract(5)
    assert op.apply(10) == 5
    assert op.unapply(5) == 10

def test_multiply_and_divide():
    assert ElementaryOperation.multiply(3).apply(2) == 6
    assert ElementaryOperation.divide(4).apply(2) == 0.5
    assert ElementaryOperation.divide(4).unapply(0.5) == 2

def test_labels():
    assert ElementaryOperation.add(2).label == "+2"
    assert ElementaryOperation.divide(100).label == "/100"
    assert ElementaryOperation.subtract(1).label == "-1"

def test_identity_pipeline():
    assert IDENTITY.is_identity
    assert len(IDENTITY) == 0
    assert IDENTITY.apply(42) == 42
    assert IDENTITY.unapply(42) == 42

def test_apply_runs_in_order_unapply_in_reverse():
    p = ConversionPipeline(ElementaryOperation.add(459.67), ElementaryOperation.multiply(5), ElementaryOperation.divide(9))
    # Fahrenheit to kelvin
    assert p.apply(32) == pytest.approx(273.15)
    assert p.unapply(273.15) == pytest.approx(32)

def test_round_trip():
    p = ConversionPipeline(ElementaryOperation.multiply(1609344), ElementaryOperation.divide(1000))
    for x in (0.0, 1.0, 12.5, -3.25):
        assert math.isclose(p.unapply(p.apply(x)), x, abs_tol=1e-12)

def test_push_and_concat_return_new_pipelines():
    base = ConversionPipeline(ElementaryOperation.multiply(2))
    pushed = base.push(ElementaryOperation.add(1))
    joined = base.concat(pushed)
    assert len(base) == 1
    assert len(pushed) == 2
    assert len(joined) == 3
    assert joined.apply(1) == 5

def test_inverse_swaps_directions():
    p = ConversionPipeline(ElementaryOperation.add(1), ElementaryOperation.multiply(10))
    inv = p.inverse
    assert inv.apply(p.apply(3)) == pytest.approx(3)
    assert inv.unapply(3) == p.apply(3)

def test_builder_accumulates():
    b = PipelineBuilder().push(ElementaryOperation.multiply(60)).concat(
        ConversionPipeline(ElementaryOperation.multiply(60))
    )
    p = b.build()
    assert isinstance(p, ConversionPipeline)
    assert p.apply(1) == 3600

def test_repr_lists_steps():
    p = ConversionPipeline(ElementaryOperation.multiply(1000), ElementaryOperation.add(2))
    assert repr(p) == "ConversionPipeline(*1000 +2)"

def test_iteration():
    ops = (ElementaryOperation.add(1), ElementaryOperation.multiply(2))
    assert tuple(ConversionPipeline(*ops)) == ops
