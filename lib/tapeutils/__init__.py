from .general_utils import log, log_enabled

__all__ = ['log', 'log_enabled']
