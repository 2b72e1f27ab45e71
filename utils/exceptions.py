# utils/exceptions.py
class LottoGeneratorError(Exception):
    """번호 생성 시스템의 기본 예외 클래스"""
    def __init__(self, message, original_error=None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)

class DataLoadError(LottoGeneratorError):
    """과거 당첨 데이터 로드 오류"""
    pass

class ValidationError(LottoGeneratorError):
    """입력 데이터 유효성 검증 오류"""
    pass

class ConfigurationError(LottoGeneratorError):
    """설정 오류"""
    pass

class InsufficientPoolError(LottoGeneratorError):
    """번호 풀에 남은 숫자가 한 게임을 만들기에 부족한 경우"""
    pass
