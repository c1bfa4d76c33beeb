__all__ = ['InvalidArgumentError']


class InvalidArgumentError(TypeError):
    '''
       Raised by a populating container when a constructor argument is
       absent or unusable. Always raised before the generator is called.
    '''

    def __init__(self, owner : str, signature : str, message : str) -> None:
        super().__init__(f'{owner}({signature}) {message}')
        self.owner = owner
        self.signature = signature
