import logging
import re

from lambertmaroc.utils.logging import LOGGER, log_not_converged


def test_package_logger():
    assert LOGGER.name == 'lambertmaroc'
    assert LOGGER.level == logging.WARNING
    assert logging.getLogger('lambertmaroc.transform.Transformer').parent is LOGGER


def test_log_not_converged(caplog):
    log_not_converged('ecef_to_geodetic', 10, 3.2e-9)
    assert 'ecef_to_geodetic did not converge within 10 iterations' in caplog.text
    assert '3.200e-09' in caplog.text
    assert caplog.records[-1].levelno == logging.WARNING

    # Every occurrence is reported
    log_not_converged('ecef_to_geodetic', 10, 3.2e-9)
    assert len(re.findall('did not converge', caplog.text)) == 2


def test_log_not_converged_small_residual(caplog):
    # Hidden at the package's default level
    log_not_converged('lambert_inverse', 5, 2e-12)
    assert 'lambert_inverse did not converge' not in caplog.text

    caplog.set_level(logging.DEBUG, logger='lambertmaroc')
    log_not_converged('lambert_inverse', 5, 2e-12)
    assert 'lambert_inverse did not converge within 5 iterations' in caplog.text
    assert caplog.records[-1].levelno == logging.DEBUG
