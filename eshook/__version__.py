VERSION = "0.1.0"
SERVICE_NAME = "eshook"
