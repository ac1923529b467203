from functools import wraps


class DevCalcError(Exception):
    '''
    Base of every error reported to the user.

    Fatal to the current expression only.
    '''

    @property
    def message(self):
        return self.args[0]

    def diagnostic(self):
        '''
        Text to show the user.
        '''
        return self.message


class ScanError(DevCalcError):
    '''
    Error located at a byte column of the source expression.
    '''

    def __init__(self, message, column=None, source=None):
        super().__init__(message)
        self.column = column
        self.source = source

    def diagnostic(self):
        '''
        Column, message, and caret pointing into the source.
        '''
        if self.column is None or self.source is None:
            return self.message
        raw = self.source.encode()
        # Caret lines up with characters, not bytes.
        width = len(raw[:max(self.column - 1, 0)].decode(errors='replace'))
        return '\n'.join([
            'Error parsing in column {}: {}'.format(self.column, self.message),
            self.source,
            ' ' * width + '^',
            ' ' * width + 'Error here',
        ])


class LexicalError(ScanError):
    pass


class StructuralError(ScanError):
    pass


class EvaluationError(DevCalcError):
    pass


def wrap_user_errors(fmt):
    '''
    Decorator that converts unexpected exceptions to EvaluationErrors.

    Passes through DevCalcErrors. The message is formatted with the call's
    arguments.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except DevCalcError:
                raise
            except Exception as e:
                raise EvaluationError(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator
