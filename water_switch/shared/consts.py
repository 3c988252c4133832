from enum import Enum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnumRegion(str, Enum):
    US = "us"
    EU = "eu"
    CN = "cn"
    IN = "in"


REGION_ENDPOINTS = {
    EnumRegion.US: "https://openapi.tuyaus.com",
    EnumRegion.EU: "https://openapi.tuyaeu.com",
    EnumRegion.CN: "https://openapi.tuyacn.com",
    EnumRegion.IN: "https://openapi.tuyain.com",
}
