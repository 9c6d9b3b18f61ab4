import pytest

from gds_geoserver.geoserver import GeoserverRequest, InvalidParameterNameError, InvalidParameterValueError, parameters


@pytest.mark.parametrize("assignments, expected", [
    ([], {}),
    ([('a', '1')], {'a': '1'}),
    ([('a', '1'), ('b', '2'), ('a', '3')], {'a': '3', 'b': '2'}),
    ([('rs:x', 'one'), ('rs:x', 'two'), ('rs:x', 'three')], {'rs:x': 'three'}),
])
def test_last_assignment_wins(assignments, expected):
    request = GeoserverRequest()
    for name, value in assignments:
        request.with_param(name, value)
    assert request.parameters == expected


def test_with_param_returns_same_request():
    request = GeoserverRequest()
    assert request.with_param('rs:geoserverUser', 'admin') is request
    assert request.with_params({'rs:geoserverWorkspace': 'XXX'}) is request


def test_empty_name_rejected():
    request = GeoserverRequest().with_param('rs:geoserverUser', 'admin')
    with pytest.raises(InvalidParameterNameError):
        request.with_param('', 'value')
    assert request.parameters == {'rs:geoserverUser': 'admin'}


def test_non_string_name_rejected():
    with pytest.raises(ValueError):
        GeoserverRequest().with_param(None, 'value')


def test_no_default_parameters():
    assert GeoserverRequest().parameters == {}
    assert len(GeoserverRequest()) == 0


def test_snapshot_is_a_copy():
    request = GeoserverRequest().with_param('a', '1')
    snapshot = request.parameters
    snapshot['b'] = '2'
    assert 'b' not in request
    assert request.parameters == {'a': '1'}


def test_initial_parameters_copied_and_validated():
    initial = {'a': '1'}
    request = GeoserverRequest(parameters=initial)
    request.with_param('a', '2')
    assert initial == {'a': '1'}

    with pytest.raises(InvalidParameterNameError):
        GeoserverRequest(parameters={'': 'x'})


def test_repr_masks_password():
    request = GeoserverRequest() \
        .with_param(parameters.USER, 'admin') \
        .with_param(parameters.PASSWORD, 'secret')
    assert 'secret' not in repr(request)
    assert 'admin' in repr(request)


@pytest.mark.parametrize("value", [None, 5, b'bytes', ['a']])
def test_non_string_value_rejected(value):
    request = GeoserverRequest().with_param('rs:b', '1')
    with pytest.raises(InvalidParameterValueError):
        request.with_param('rs:a', value)
    assert request.parameters == {'rs:b': '1'}
    assert len(request) == 1


def test_empty_string_value_accepted():
    assert GeoserverRequest().with_param('rs:a', '').parameters == {'rs:a': ''}
