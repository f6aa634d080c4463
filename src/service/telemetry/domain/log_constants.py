class ScopeKeys:
    """Keys the functions host puts on the invocation logging scope"""

    FUNCTION_INVOCATION_ID = 'MS_FunctionInvocationId'
    FUNCTION_NAME = 'MS_FunctionName'


class LogConstants:
    """Property names written onto telemetry records"""

    CATEGORY_NAME_KEY = 'Category'
    LOG_LEVEL_KEY = 'LogLevel'
    EVENT_ID_KEY = 'EventId'
    EVENT_NAME_KEY = 'EventName'
    INVOCATION_ID_KEY = 'InvocationId'
    PROCESS_ID_KEY = 'ProcessId'
    HTTP_METHOD_KEY = 'HttpMethod'
    HTTP_PATH_KEY = 'HttpPath'

    # Well-known activity tags
    NAME_KEY = 'Name'
    SUCCEEDED_KEY = 'Succeeded'
    CLIENT_IP_KEY = 'ClientIp'
