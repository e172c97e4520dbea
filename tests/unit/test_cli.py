import boreas
import botocore.exceptions
import pytest
import time
from boreas.cli import find, invalidate, run
from click.testing import CliRunner
from unittest import mock


@pytest.fixture
def api():
    api = mock.Mock(spec=boreas.Client)
    api.create_invalidation.return_value = 'I2J0I21PCUYOIK'
    api.get_invalidation_status.return_value = 'Completed'
    api.list_distributions.return_value = iter([
        {
            'Id': 'E1',
            'Aliases': {
                'Quantity': 1,
                'Items': ['Example.com']
            }
        },
        {
            'Id': 'E2',
            'Aliases': {
                'Quantity': 1,
                'Items': ['other.example.com']
            }
        },
        {
            'Id': 'E3',
            'Aliases': {
                'Quantity': 1,
                'Items': ['example.com']
            }
        },
    ])
    return api


@pytest.fixture
def bctx(api):
    return boreas.Context(api=api)


def test_invalidate_submits_the_given_paths(api, bctx):
    runner = CliRunner()
    result = runner.invoke(
        invalidate, ['-dist', 'ABC123', '-ref', 'some-ref', '-wait', '0', 'foo', '/bar'],
        obj=bctx)

    assert result.exit_code == 0
    assert 'Invalidation ID: "I2J0I21PCUYOIK"' in result.output
    api.create_invalidation.assert_called_once_with('ABC123', 'some-ref',
                                                    ['/foo', '/bar'])
    api.get_invalidation_status.assert_not_called()


def test_invalidate_defaults(api, bctx):
    runner = CliRunner()
    result = runner.invoke(invalidate, ['--dist', 'ABC123', '--wait', '0'],
                           obj=bctx)

    assert result.exit_code == 0
    dist_id, caller_reference, paths = api.create_invalidation.call_args[0]
    assert dist_id == 'ABC123'
    assert abs(int(caller_reference) - time.time()) < 5
    assert paths == ['/*']


def test_invalidate_reads_options_from_env(api, bctx):
    runner = CliRunner()
    result = runner.invoke(invalidate, ['index.html'],
                           obj=bctx,
                           env={
                               'BOREAS_DIST': 'ABC123',
                               'BOREAS_REF': 'from-env',
                               'BOREAS_WAIT': '0',
                           })

    assert result.exit_code == 0
    api.create_invalidation.assert_called_once_with('ABC123', 'from-env',
                                                    ['/index.html'])


def test_invalidate_waits_for_completion(api, bctx):
    api.get_invalidation_status.side_effect = ['InProgress', 'Completed']

    runner = CliRunner()
    with mock.patch('boreas.invalidator.time') as mock_time:
        mock_time.monotonic.side_effect = [0, 0, 10]
        result = runner.invoke(invalidate, ['-dist', 'ABC123', '-wait', '1m'],
                               obj=bctx)

    assert result.exit_code == 0
    assert 'Invalidation in progress.\n' in result.output
    assert api.get_invalidation_status.call_count == 2


def test_run_returns_0_on_success(bctx, capsys):
    returned = run(invalidate, ['-dist', 'ABC123', '-wait', '0'], obj=bctx)

    assert returned == 0


def test_run_without_distribution_returns_3(api, bctx, capsys):
    returned = run(invalidate, ['-wait', '0', '/foo'], obj=bctx)

    assert returned == 3
    assert 'distribution must be set' in capsys.readouterr().err
    api.create_invalidation.assert_not_called()


@pytest.mark.parametrize("args", [
    ['-dist', 'ABC123', '--unknown-flag'],
    ['-dist', 'ABC123', '-wait', 'soon'],
    ['-dist'],
])
def test_run_with_bad_usage_returns_2(api, bctx, capsys, args):
    returned = run(invalidate, args, obj=bctx)

    assert returned == 2
    assert 'Error' in capsys.readouterr().err
    api.create_invalidation.assert_not_called()


def test_run_with_api_error_returns_1(api, bctx, capsys):
    api.create_invalidation.side_effect = botocore.exceptions.ClientError(
        {
            'Error': {
                'Code': 'NoSuchDistribution',
                'Message': 'The specified distribution does not exist.'
            }
        }, 'CreateInvalidation')

    returned = run(invalidate, ['-dist', 'ABC123', '-wait', '0'], obj=bctx)

    assert returned == 1
    assert 'The specified distribution does not exist.' in capsys.readouterr(
    ).err


def test_run_with_timeout_returns_1(api, bctx, capsys):
    api.get_invalidation_status.return_value = 'InProgress'

    with mock.patch('boreas.invalidator.time') as mock_time:
        mock_time.monotonic.side_effect = [0, 0, 10, 20]
        returned = run(invalidate, ['-dist', 'ABC123', '-wait', '15s'],
                       obj=bctx)

    assert returned == 1
    assert 'wait timeout of 15s exceeded' in capsys.readouterr().err


def test_find_prints_matching_ids(bctx):
    runner = CliRunner()
    result = runner.invoke(find, ['EXAMPLE.com'], obj=bctx)

    assert result.exit_code == 0
    assert result.output == 'E1\nE3\n'


def test_find_without_match_prints_nothing(bctx):
    runner = CliRunner()
    result = runner.invoke(find, ['unknown.example.com'], obj=bctx)

    assert result.exit_code == 0
    assert result.output == ''


@pytest.mark.parametrize("args", [[], [''], ['a.example.com', 'b.example.com']])
def test_find_with_bad_usage_returns_2(api, bctx, capsys, args):
    returned = run(find, args, obj=bctx)

    assert returned == 2
    assert 'Error' in capsys.readouterr().err
    api.list_distributions.assert_not_called()


def test_find_with_api_error_returns_1(api, bctx, capsys):
    api.list_distributions.side_effect = botocore.exceptions.NoCredentialsError(
    )

    returned = run(find, ['example.com'], obj=bctx)

    assert returned == 1
    assert 'Unable to locate credentials' in capsys.readouterr().err


def test_invalidate_with_wait_in_nanoseconds_polls(api, bctx):
    runner = CliRunner()
    with mock.patch('boreas.invalidator.time') as mock_time:
        mock_time.monotonic.side_effect = [0, 0]
        result = runner.invoke(
            invalidate, ['-dist', 'ABC123', '-wait', '900000000000ns'],
            obj=bctx)

    assert result.exit_code == 0
    api.get_invalidation_status.assert_called_once_with(
        'ABC123', 'I2J0I21PCUYOIK')
