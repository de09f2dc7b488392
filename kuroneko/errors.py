class KuronekoError(Exception):
    """Generic kuroneko exception, subclassed by more specific exceptions.
    """
    message = None

    def __str__(self):
        if self.message is not None:
            return self.message
        return super(KuronekoError, self).__str__()

class InvalidTrackingNumber(KuronekoError):
    """Raised when a tracking number fails local validation. The offending
    value is kept in the tracking_number attribute.
    """
    def __init__(self, tracking_number):
        super(InvalidTrackingNumber, self).__init__(tracking_number)
        self.tracking_number = tracking_number

class InvalidCharacter(InvalidTrackingNumber):
    """Raised when the tracking number contains anything but decimal digits
    once the separators are removed.
    """
    message = '不正な数値です'

class InvalidLength(InvalidTrackingNumber):
    """Raised when the tracking number is not 11 or 12 digits long.
    """
    message = '12 or 11桁の伝票番号を入力してください'

class ChecksumMismatch(InvalidTrackingNumber):
    """Raised when the trailing check digit does not match the one computed
    from the rest of the tracking number.
    """
    message = '伝票番号に誤りがあります'

class TrackingFailure(KuronekoError):
    """Generic tracking failure, subclassed by more specific
    exceptions.
    """
    pass

class TrackingNetworkFailure(TrackingFailure):
    """Raised for network communication failure when talking to the
    tracking service. For example, a network timeout or DNS resolution
    failure.
    """
    pass

class TrackingApiFailure(TrackingFailure):
    """Raised when the tracking service answered, but with an error status.
    """
    pass

class UsageError(KuronekoError):
    """Raised for bad command line usage.
    """
    pass
