import pytest

from ngffmeta import MappingResolver, TransformResolver, UnresolvedTransformError


def test_mapping_resolver() -> None:
    resolver = MappingResolver({"scales/0": [1, 2, 3]})
    assert isinstance(resolver, TransformResolver)
    assert resolver.resolve("scales/0") == [1.0, 2.0, 3.0]
    assert all(isinstance(v, float) for v in resolver.resolve("scales/0"))
    assert "scales/0" in repr(resolver)


def test_mapping_resolver_missing() -> None:
    resolver = MappingResolver({})
    with pytest.raises(UnresolvedTransformError, match="nope") as exc_info:
        resolver.resolve("nope")
    assert exc_info.value.path == "nope"
    assert isinstance(exc_info.value.__cause__, KeyError)


def test_custom_resolver_protocol() -> None:
    class ZeroResolver:
        def resolve(self, path: str) -> list[float]:
            return [0.0]

    assert isinstance(ZeroResolver(), TransformResolver)
    assert not isinstance(object(), TransformResolver)
