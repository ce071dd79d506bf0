class AppStatusCode:
    DATA_RETRIEVED_SUCCESSFULLY = "100"

    INVALID_INPUT = "200"
    REQUIRED_VALIDATION_ERROR = "201"
    NOT_FOUND = "202"

    OPERATION_FAILED = "300"
    PERSISTENCE_FAILURE = "302"
