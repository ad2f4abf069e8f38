import json
import os
import tempfile
import unittest

from performance_test import PerformanceTest


class PerformanceHarness(unittest.TestCase):
    def test_runs_and_reports(self):
        tester = PerformanceTest(secret_length=64, chunk_size=8, size=4, threshold=3)
        tester.run_distribute(num_runs=2)
        tester.run_reconstruct(num_runs=2)
        tester.run_new_prime(num_runs=2)
        self.assertEqual({k: len(v) for k, v in tester.results.items()},
                         {"distribute": 2, "reconstruct": 2, "new_prime": 2})
        self.assertIn("reconstruct", tester.summary())

        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "results.json")
            tester.save_results(path)
            with open(path, "r") as f:
                saved = json.load(f)
        self.assertEqual(saved["params"], "64-8-4-3")


if __name__ == '__main__':
    unittest.main()
