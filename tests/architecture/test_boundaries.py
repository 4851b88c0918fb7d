from pytest_archon import archrule


def test_ports_isolation() -> None:
    """
    Ports are the lowest level.
    They must not import from adapters, bindings, or the extension layer.
    """
    (
        archrule("ports_isolation")
        .match("async_transmit.ports*")
        .should_not_import("async_transmit.adapters*")
        .should_not_import("async_transmit.bindings*")
        .should_not_import("async_transmit.ext")
        .check("async_transmit")
    )


def test_adapters_are_transport_agnostic() -> None:
    """
    Adapters compose over any transmitter.
    They must not depend on a concrete transport binding or its library.
    """
    (
        archrule("adapters_transport_agnostic")
        .match("async_transmit.adapters*")
        .should_not_import("async_transmit.bindings*")
        .should_not_import("anyio*")
        .check("async_transmit")
    )


def test_optional_transport_stays_in_its_binding() -> None:
    """
    AnyIO is an optional extra; only its own binding module may import it.
    """
    (
        archrule("anyio_confined")
        .match("async_transmit*")
        .exclude("async_transmit.bindings.memory_stream")
        .exclude("async_transmit.bindings")
        .exclude("async_transmit")
        .should_not_import("anyio*")
        .check("async_transmit", only_direct_imports=True)
    )
