"""Contains the name for the logger of gradkit modules.

``gradkit`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
Only the front ends (:class:`~gradkit.derivative_kit.DerivativeKit`,
:class:`~gradkit.finite.finite_difference.FiniteDifferenceDerivative` and
:func:`~gradkit.calculus.gradient.build_gradient`) emit records, at ``DEBUG``
level. The numerical engines themselves stay silent and report problems by
raising.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``gradkit.logger.gradkit_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.DEBUG,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "gradkit"
gradkit_logger = logging.getLogger(logger_name)
