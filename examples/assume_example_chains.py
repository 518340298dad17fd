"""Demonstrates how to write fluent assertions with assume.

* Every chain starts from a subject: `expect(x)`, `assume.that(x)`,
  `sincerely.hope.that(x)` are interchangeable.
* Linking words (`to`, `be`, `has`, ...) only improve readability.
* Modifiers change the verdict: `not_` negates, `deep` compares structure.
* A failed check raises `AssertionFailure` with a structured `Failure`.
"""

from assume import AssertionFailure, assume, expect, holds, predicate, sincerely
from assume.reports import render_failure


# =============================================================================
# Custom predicate
# =============================================================================

@predicate("valid_order, a_valid_order")
def valid_order(chain):
    order = chain.subject
    return isinstance(order, dict) and order.get("total", 0) >= 0 and bool(order.get("items"))


def main() -> None:
    order = {"id": 7, "items": ["tv", "cable"], "total": 499.0}

    expect(order).to.be.an("object")
    expect(order).to.include("items")
    expect(order["items"]).to.have.length(2).and_.not_.be.empty()
    expect(order["total"]).to.be.within(0, 1000)
    assume.that(order).is_.a_valid_order()
    sincerely.hope.that(order["id"]).is_.above(0)
    expect({"items": ["tv"]}).to.deep.equal({"items": ["tv"]})

    if holds(order).has_own("coupon"):
        print("order has a coupon")

    try:
        expect(order).to.deep.equal({"id": 7, "items": ["tv"], "total": 499.0})
    except AssertionFailure as failure:
        render_failure(failure)


if __name__ == "__main__":
    main()
