import logging

internal_logger = logging.getLogger("cookiestr.internal")
emitter_logger = logging.getLogger("cookiestr.emitter")
