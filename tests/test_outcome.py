import unittest
from typing import Any

from atoll_rpc.errors import JsonDecodeError
from atoll_rpc.models import AccountInfo, Block, InvalidJson, RewardType, RpcResult, Success
from atoll_rpc.outcome import decode_outcome


class DecodeOutcomeTests(unittest.TestCase):
    def test_success_envelope(self) -> None:
        body = '{"jsonrpc":"2.0","id":9,"result":{"context":{"apiVersion":"1.18.0","slot":42},"value":1500}}'

        outcome = decode_outcome(body, RpcResult[int])

        self.assertIsInstance(outcome, Success)
        self.assertEqual(outcome.response.id, 9)
        self.assertEqual(outcome.result.value, 1500)
        self.assertEqual(outcome.result.context.slot, 42)
        self.assertEqual(outcome.result.context.api_version, "1.18.0")

    def test_error_envelope(self) -> None:
        body = '{"jsonrpc":"2.0","id":1,"error":{"code":-32602,"message":"Invalid params"}}'

        outcome = decode_outcome(body, RpcResult[int])

        self.assertIsInstance(outcome, InvalidJson)
        self.assertEqual(outcome.code, -32602)
        self.assertEqual(outcome.message, "Invalid params")
        self.assertIsNone(outcome.error.error.data)
        self.assertEqual(outcome.error.id, 1)

    def test_error_envelope_keeps_data(self) -> None:
        body = '{"jsonrpc":"2.0","id":3,"error":{"code":-32004,"message":"Block not available","data":"slot 5"}}'

        outcome = decode_outcome(body, int)

        self.assertIsInstance(outcome, InvalidJson)
        self.assertEqual(outcome.error.error.data, "slot 5")

    def test_error_envelope_with_null_id(self) -> None:
        body = '{"jsonrpc":"2.0","id":null,"error":{"code":-32700,"message":"Parse error"}}'

        outcome = decode_outcome(body, int)

        self.assertIsInstance(outcome, InvalidJson)
        self.assertIsNone(outcome.error.id)

    def test_success_shape_wins_when_both_match(self) -> None:
        body = '{"jsonrpc":"2.0","id":1,"result":5,"error":{"code":-1,"message":"ignored"}}'

        outcome = decode_outcome(body, int)

        self.assertIsInstance(outcome, Success)
        self.assertEqual(outcome.result, 5)

    def test_unrecognized_body_is_decode_error(self) -> None:
        with self.assertRaises(JsonDecodeError) as ctx:
            decode_outcome('{"not":"recognized"}', RpcResult[int])

        self.assertEqual(ctx.exception.path, "jsonrpc")

    def test_decode_error_reports_success_path(self) -> None:
        body = '{"jsonrpc":"2.0","id":1,"result":{"context":{"slot":"abc"},"value":1}}'

        with self.assertRaises(JsonDecodeError) as ctx:
            decode_outcome(body, RpcResult[int])

        self.assertEqual(ctx.exception.path, "result.context.slot")
        self.assertTrue(str(ctx.exception).startswith("result.context.slot: "))

    def test_invalid_json_text_is_decode_error_at_root(self) -> None:
        with self.assertRaises(JsonDecodeError) as ctx:
            decode_outcome('{"jsonrpc": "2.0", "id": 1, "result"', int)

        self.assertEqual(ctx.exception.path, ".")

    def test_unknown_top_level_fields_are_tolerated(self) -> None:
        outcome = decode_outcome('{"jsonrpc":"2.0","id":1,"result":12,"extra":true}', int)

        self.assertIsInstance(outcome, Success)
        self.assertEqual(outcome.result, 12)

    def test_untyped_result(self) -> None:
        outcome = decode_outcome('{"jsonrpc":"2.0","id":1,"result":{"anything":[1,2]}}', Any)

        self.assertEqual(outcome.result, {"anything": [1, 2]})

    def test_account_info_payload(self) -> None:
        body = (
            '{"jsonrpc":"2.0","id":1,"result":{"context":{"apiVersion":"2.0.3","slot":7},'
            '"value":{"data":["","base64"],"executable":false,"lamports":2000000000,'
            '"owner":"11111111111111111111111111111111","rentEpoch":18446744073709551615,"space":0}}}'
        )

        outcome = decode_outcome(body, RpcResult[AccountInfo])

        account = outcome.result.value
        self.assertEqual(account.data, ("", "base64"))
        self.assertEqual(account.sol, 2.0)
        self.assertEqual(account.rent_epoch, 18446744073709551615)

    def test_missing_account_is_none(self) -> None:
        body = '{"jsonrpc":"2.0","id":1,"result":{"context":{"slot":7},"value":null}}'

        outcome = decode_outcome(body, RpcResult[AccountInfo])

        self.assertIsNone(outcome.result.value)

    def test_block_payload(self) -> None:
        body = (
            '{"jsonrpc":"2.0","id":1,"result":{"blockHeight":10,"blockTime":1700000000,'
            '"blockhash":"h1","parentSlot":9,"previousBlockhash":"h0",'
            '"rewards":[{"pubkey":"v1","lamports":5000,"postBalance":10,"rewardType":"Fee","commission":null}],'
            '"transactions":[]}}'
        )

        outcome = decode_outcome(body, Block)

        block = outcome.result
        self.assertEqual(block.parent_slot, 9)
        self.assertEqual(block.rewards[0].public_key, "v1")
        self.assertEqual(block.rewards[0].reward_type, RewardType.FEE)
    def test_string_id_and_result_are_not_coerced(self) -> None:
        with self.assertRaises(JsonDecodeError) as ctx:
            decode_outcome('{"jsonrpc":"2.0","id":"1","result":"42"}', int)

        self.assertEqual(ctx.exception.path, "id")

    def test_string_result_is_not_coerced(self) -> None:
        with self.assertRaises(JsonDecodeError) as ctx:
            decode_outcome('{"jsonrpc":"2.0","id":1,"result":"42"}', int)

        self.assertEqual(ctx.exception.path, "result")

    def test_string_error_code_is_rejected(self) -> None:
        body = '{"jsonrpc":"2.0","id":1,"error":{"code":"-32602","message":"Invalid params"}}'

        with self.assertRaises(JsonDecodeError):
            decode_outcome(body, int)

    def test_id_above_one_byte_is_rejected(self) -> None:
        with self.assertRaises(JsonDecodeError) as ctx:
            decode_outcome('{"jsonrpc":"2.0","id":256,"result":1}', int)

        self.assertEqual(ctx.exception.path, "id")

    def test_error_envelope_id_above_one_byte_is_rejected(self) -> None:
        with self.assertRaises(JsonDecodeError):
            decode_outcome('{"jsonrpc":"2.0","id":300,"error":{"code":-32600,"message":"Invalid request"}}', int)

    def test_decode_error_is_raised_without_logging(self) -> None:
        with self.assertNoLogs("atoll_rpc", level="DEBUG"):
            with self.assertRaises(JsonDecodeError):
                decode_outcome('{"not":"recognized"}', int)


if __name__ == "__main__":
    unittest.main()
