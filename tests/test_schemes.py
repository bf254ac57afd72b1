import pytest

from cryptoprims.schemes import (
    AsymmetricEncryptionScheme,
    CommitmentScheme,
    CRHScheme,
    TwoToOneCRHScheme,
)


@pytest.mark.parametrize(
    "abstract",
    [CRHScheme, TwoToOneCRHScheme, CommitmentScheme, AsymmetricEncryptionScheme],
)
def test_interfaces_cannot_be_instantiated(abstract):
    with pytest.raises(TypeError):
        abstract()