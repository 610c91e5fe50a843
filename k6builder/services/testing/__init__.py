from k6builder.services.testing.k6_test_builder import K6TestBuilder
from k6builder.services.testing.factories import (
    create_k6_load_test,
    create_k6_smoke_test,
    create_k6_spike_test,
    create_k6_stress_test,
)

__all__ = [
    "K6TestBuilder",
    "create_k6_load_test",
    "create_k6_smoke_test",
    "create_k6_spike_test",
    "create_k6_stress_test",
]
