__version__ = "0.1.0"
__author__ = "Nicolai Krebs"

## Logging ##
import logging

# default for library
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


# custom logging
class Logging:
    """
    Configuration of logging for lattice reduction estimation.
    """

    @staticmethod
    def set_level(level):
        """Set logging level of library.

        :param level: logging level, e.g. ``logging.DEBUG``
        """
        logger.setLevel(level)

    @staticmethod
    def set_estimation_debug_logging_level(level):
        """Set logging level of estimation execution.

        ``INFO`` shows the result of each cost model.
        ``DEBUG`` shows additional information about parameters and runtime.

        :param level: logging level, e.g. ``logging.DEBUG``
        """
        logging.getLogger(logger.name + ".algorithms.estimation_logging").setLevel(level)


from .reduction_cost_models import (  # noqa: E402
    CostModel,
    BDGL_SIEVE,
    Q_SIEVE,
    BJG_SIEVE,
    ADPS_SIEVE,
    CHALOY_SIEVE,
    CHENGUE_ENUM,
    ABF_ENUM,
    ABLR_ENUM,
    LOTUS_ENUM,
    KYBER,
    MATZOV,
)
from .reduction import bkz_cost, bkz_delta, bkz_beta, check_parameters, InvalidParameters  # noqa: E402
from .simulator import gsa_simulator, zgsa_simulator  # noqa: E402
from .short_vectors import (  # noqa: E402
    ShortVectors,
    InfeasibleShortVectors,
    kyber_short_vectors,
    matzov_short_vectors,
)
from .algorithms import Configuration, estimate  # noqa: E402
