""" Logging configuration for vcfsample2info.

You can override the settings in logging_config.py by copying the whole
file to logging_override.py. The original settings in logging_config.py
write diagnostics to standard error, because standard output carries the
VCF records.

For a detailed description of the settings, see the Python documentation:
https://docs.python.org/3/library/logging.config.html#logging-config-dictschema

Do not commit logging_override.py to source control.
"""

LOGGING = {
    'root': {'handlers': ['console'],
             'level': 'WARNING'},
    'loggers': {
        "sample2info": {"level": "WARNING"},
    },

    # This lets you call logging.getLogger() before the configuration is done.
    'disable_existing_loggers': False,

    'version': 1,
    'formatters': {'basic': {
        'format': '%(levelname)s: %(message)s'}},
    'handlers': {'console': {'class': 'logging.StreamHandler',
                             'stream': 'ext://sys.stderr',
                             'level': 'DEBUG',
                             'formatter': 'basic'}},
}
