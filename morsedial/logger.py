from dlogger import DLogger

class Logger(DLogger):
    ICONS = {
        'success': 'OK',
        'error': 'ERR',
        'warning': 'WARN',
        'info': 'INFO',
        'select': 'SEL',
        'morse': 'MORSE',
        'status': 'STAT',
        'driver': 'DRV'
    }

    STYLES = {
        'success': 'bright_green',
        'error': 'bright_red',
        'warning': 'bright_yellow',
        'info': 'bright_cyan',
        'select': 'cyan',
        'morse': 'purple',
        'status': 'yellow',
        'driver': 'magenta'
    }

    def __init__(self):
        # Initialize with prebuilt icons & styles.
        super().__init__(
            icons=self.ICONS,
            styles=self.STYLES
        )


Log = Logger()
