# Parameter names understood by the geoserver service extension. The 'rs:' prefix is sent verbatim.

AUTH_TYPE = 'rs:geoserverAuthType'
USER = 'rs:geoserverUser'
PASSWORD = 'rs:geoserverPassword'
URL = 'rs:geoserverUrl'
SERVICE_DESCRIPTOR_URI = 'rs:serviceDescriptorUri'
WORKSPACE = 'rs:geoserverWorkspace'
DATASTORE = 'rs:geoserverDatastore'

SENSITIVE_PARAMETERS = frozenset([PASSWORD])
