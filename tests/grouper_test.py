#!/usr/bin/env python3
"""
Test script for the chart grouping logic
"""
import sys
import unittest
from pathlib import Path

# Add parent directory to import path
parent_dir = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(parent_dir))

from utils.logger import Logger
Logger.log_to_file = False

from data.grouper import CHART_GROUPS, build_groups, build_label, group_definitions
from data.models import ParsedTable
from data.parsers.parser_standard import StandardParser


def make_table(columns, units=None):
    """Builds a ParsedTable directly from {header: values}."""
    headers = list(columns)
    units = units or {}
    return ParsedTable(
        file_name="test.csv",
        headers=headers,
        units={h: units.get(h, "") for h in headers},
        columns=columns,
        display_title="test",
    )


class GroupDefinitionsTest(unittest.TestCase):

    def test_fixed_table_order(self):
        titles = [title for title, _ in CHART_GROUPS]
        self.assertEqual(titles, [
            "EGT1 a EGT8",
            "Oil-Pressur et Fuel-P",
            "Admission",
            "Etage-2",
            "Turbo_Oil, Exhaut_R, Exhaust_L",
        ])
        self.assertEqual(CHART_GROUPS[0][1], ["EGT1", "EGT2", "EGT3", "EGT4", "EGT5", "EGT6", "EGT7", "EGT8"])

    def test_unclaimed_headers_become_singletons(self):
        table = make_table({"Foo": [1.0], "EGT2": [1.0], "Bar": [2.0]})
        definitions = group_definitions(table)
        self.assertEqual(definitions[len(CHART_GROUPS):], [("Foo", ["Foo"]), ("Bar", ["Bar"])])


class BuildGroupsTest(unittest.TestCase):

    def test_egt_group_and_singleton(self):
        table = make_table({"EGT1": [1.0, 2.0], "EGT3": [3.0, None], "Foo": [5.0, 6.0]})
        groups = build_groups(table)

        self.assertEqual(len(groups), len(CHART_GROUPS) + 1)
        egt = groups[0]
        self.assertEqual(egt.title, "EGT1 a EGT8")
        self.assertEqual([s.label for s in egt.series], ["EGT1", "EGT3"])
        self.assertEqual(egt.series[1].values, (3.0, None))
        self.assertEqual(groups[-1].title, "Foo")
        self.assertEqual([s.label for s in groups[-1].series], ["Foo"])

    def test_fixed_groups_always_emitted(self):
        groups = build_groups(make_table({"Foo": [1.0]}))
        for group in groups[:len(CHART_GROUPS)]:
            self.assertFalse(group.has_data)
            self.assertEqual(group.series, ())
            self.assertIsNone(group.unit)

    def test_member_order_follows_definition(self):
        table = make_table({"fuel-P": [1.0], "oil-Pressur": [2.0]})
        group = build_groups(table)[1]
        self.assertEqual([s.label for s in group.series], ["oil-Pressur", "fuel-P"])

    def test_names_are_case_sensitive(self):
        table = make_table({"Admission": [1.0], "admission": [2.0]})
        groups = build_groups(table)
        self.assertEqual([s.label for s in groups[2].series], ["admission"])
        self.assertEqual(groups[-1].title, "Admission")
        self.assertEqual(len(groups), len(CHART_GROUPS) + 1)

    def test_all_gap_column_is_excluded(self):
        table = make_table({"EGT1": [None, None], "EGT2": [1.0, None]})
        egt = build_groups(table)[0]
        self.assertEqual([s.label for s in egt.series], ["EGT2"])

    def test_group_with_only_gaps_has_no_series(self):
        table = make_table({"C": [None, None]})
        group = build_groups(table)[-1]
        self.assertEqual(group.title, "C")
        self.assertEqual(group.series, ())
        self.assertFalse(group.has_data)

    def test_units_in_title_and_labels(self):
        table = make_table({"EGT1": [1.0], "EGT2": [2.0]}, units={"EGT1": "°C", "EGT2": "K"})
        egt = build_groups(table)[0]
        self.assertEqual(egt.title, "EGT1 a EGT8 [°C]")
        self.assertEqual(egt.unit, "°C")
        self.assertEqual([s.label for s in egt.series], ["EGT1 (°C)", "EGT2 (K)"])

    def test_group_unit_skips_blank_units(self):
        table = make_table({"EGT1": [1.0], "EGT2": [2.0], "EGT3": [3.0]}, units={"EGT1": " ", "EGT2": "°C", "EGT3": "K"})
        egt = build_groups(table)[0]
        self.assertEqual(egt.title, "EGT1 a EGT8 [°C]")
        self.assertEqual(egt.unit, "°C")
        self.assertEqual([s.label for s in egt.series], ["EGT1", "EGT2 (°C)", "EGT3 (K)"])

    def test_no_unit_anywhere(self):
        table = make_table({"EGT1": [1.0], "EGT2": [2.0]})
        egt = build_groups(table)[0]
        self.assertEqual(egt.title, "EGT1 a EGT8")
        self.assertIsNone(egt.unit)

    def test_unit_kept_when_first_column_is_all_gaps(self):
        table = make_table({"EGT1": [None], "EGT2": [2.0]}, units={"EGT1": "°C", "EGT2": "°C"})
        egt = build_groups(table)[0]
        self.assertEqual(egt.title, "EGT1 a EGT8 [°C]")
        self.assertEqual([s.label for s in egt.series], ["EGT2 (°C)"])

    def test_custom_fixed_groups(self):
        table = make_table({"a": [1.0], "b": [2.0], "c": [3.0]})
        groups = build_groups(table, fixed_groups=[("A and B", ["a", "b"])])
        self.assertEqual([g.title for g in groups], ["A and B", "c"])

    def test_sample_file(self):
        text = "A;B;C\n;m/s;\n1;2,0;x\n2;;y\n"
        table = StandardParser().parse_text(text)
        singles = build_groups(table)[len(CHART_GROUPS):]

        self.assertEqual([g.title for g in singles], ["A", "B [m/s]", "C"])
        self.assertEqual([s.label for s in singles[0].series], ["A"])
        self.assertEqual([s.label for s in singles[1].series], ["B (m/s)"])
        self.assertEqual(singles[1].series[0].values, (2.0, None))
        self.assertEqual(singles[2].series, ())


class BuildLabelTest(unittest.TestCase):

    def test_label(self):
        self.assertEqual(build_label("B", "m/s"), "B (m/s)")
        self.assertEqual(build_label("B", ""), "B")
        self.assertEqual(build_label("B", "  "), "B")
        self.assertEqual(build_label("B", None), "B")


if __name__ == '__main__':
    unittest.main()
