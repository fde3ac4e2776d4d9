from enum import Enum


# Public client registration shared by the SQL Server drivers.
JDBC_FEDAUTH_CLIENT_ID = "7f98cb04-cd1e-40df-9140-3bf7e2cea4db"

DEFAULT_SCOPE_SUFFIX = "/.default"


class AuthenticationMode(Enum):
    PASSWORD = "ActiveDirectoryPassword"
    SERVICE_PRINCIPAL = "ActiveDirectoryServicePrincipal"
    INTEGRATED = "ActiveDirectoryIntegrated"
