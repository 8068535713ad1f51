"""
Unit tests for column composition and window allocation.
"""

import pytest
from pwlayout.geometry import ColumnType, Flip, Rect, Reserve, Rotation, Size, Split
from pwlayout.layouts.columns import ColumnKind, allocate_windows, compose_columns
from pwlayout.layouts.layout_base import LayoutDefinition


def center_main(**kwargs):
    return LayoutDefinition(column_type=ColumnType.CENTER_MAIN, **kwargs)


@pytest.mark.unit
class TestAllocateWindows:
    """Test how windows are distributed over columns."""

    def test_main_and_stack(self):
        assert allocate_windows(5, LayoutDefinition()) == (1, 4, 0)

    def test_stack_only(self):
        definition = LayoutDefinition(column_type=ColumnType.STACK)
        assert allocate_windows(5, definition) == (0, 5, 0)

    def test_main_takes_all_when_count_is_large(self):
        definition = LayoutDefinition(main_split=Split.VERTICAL, main_window_count=3)
        assert allocate_windows(2, definition) == (2, 0, 0)

    def test_unsplit_main_holds_one_window(self):
        definition = LayoutDefinition(main_split=Split.NONE, main_window_count=3)
        assert allocate_windows(5, definition) == (1, 4, 0)

    def test_zero_main_count_disables_main(self):
        definition = LayoutDefinition(main_window_count=0)
        assert allocate_windows(3, definition) == (0, 3, 0)

    def test_balanced_stacks_favour_first(self):
        assert allocate_windows(8, center_main()) == (1, 4, 3)
        assert allocate_windows(7, center_main()) == (1, 3, 3)

    def test_unbalanced_stacks(self):
        assert allocate_windows(8, center_main(balance_stacks=False)) == (1, 7, 0)

    def test_sum_matches_window_count(self):
        definitions = [
            LayoutDefinition(),
            LayoutDefinition(column_type=ColumnType.STACK),
            center_main(main_split=Split.VERTICAL, main_window_count=2),
            center_main(balance_stacks=False),
        ]
        for definition in definitions:
            for count in range(0, 30):
                assert sum(allocate_windows(count, definition)) == count


@pytest.mark.unit
class TestComposeColumns:
    """Test column rects."""

    def test_single_window_takes_everything(self, standard_area):
        columns = compose_columns(standard_area, 1, LayoutDefinition())
        assert len(columns) == 1
        assert columns[0].kind == ColumnKind.MAIN
        assert columns[0].rect == standard_area
        assert columns[0].window_count == 1

    def test_main_and_stack(self, standard_area):
        main, stack = compose_columns(standard_area, 3, LayoutDefinition())
        assert main.rect == Rect(0, 0, 960, 1080)
        assert main.window_count == 1
        assert main.split == Split.NONE
        assert stack.kind == ColumnKind.FIRST_STACK
        assert stack.rect == Rect(960, 0, 960, 1080)
        assert stack.window_count == 2
        assert stack.split == Split.HORIZONTAL

    def test_pixel_main_size(self, standard_area):
        definition = LayoutDefinition(main_size=Size.pixel(600))
        main, stack = compose_columns(standard_area, 2, definition)
        assert main.rect.width == 600
        assert stack.rect == Rect(600, 0, 1320, 1080)

    def test_stack_only_fills_width(self, standard_area):
        definition = LayoutDefinition(column_type=ColumnType.STACK)
        (stack,) = compose_columns(standard_area, 4, definition)
        assert stack.kind == ColumnKind.FIRST_STACK
        assert stack.rect == standard_area

    def test_disabled_main_leaves_stack_only(self, standard_area):
        definition = LayoutDefinition(main_window_count=0)
        (stack,) = compose_columns(standard_area, 3, definition)
        assert stack.kind == ColumnKind.FIRST_STACK
        assert stack.rect == standard_area

    def test_center_main_positions(self, standard_area):
        main, first, second = compose_columns(standard_area, 3, center_main())
        assert main.rect == Rect(480, 0, 960, 1080)
        assert first.rect == Rect(0, 0, 480, 1080)
        assert second.rect == Rect(1440, 0, 480, 1080)

    def test_center_main_empty_second_stack_reclaimed(self, standard_area):
        columns = compose_columns(standard_area, 2, center_main())
        assert [c.kind for c in columns] == [ColumnKind.MAIN, ColumnKind.FIRST_STACK]
        assert columns[0].rect == Rect(960, 0, 960, 1080)
        assert columns[1].rect == Rect(0, 0, 960, 1080)

    def test_reserve_keeps_empty_columns(self, standard_area):
        definition = center_main(reserve=Reserve.RESERVE)
        main, first, second = compose_columns(standard_area, 1, definition)
        assert main.rect == Rect(480, 0, 960, 1080)
        assert first.rect == Rect(0, 0, 480, 1080)
        assert first.window_count == 0
        assert second.rect == Rect(1440, 0, 480, 1080)
        assert second.window_count == 0

    def test_reserve_and_center(self, standard_area):
        definition = center_main(reserve=Reserve.RESERVE_AND_CENTER)
        columns = compose_columns(standard_area, 1, definition)
        assert len(columns) == 1
        assert columns[0].rect == Rect(480, 0, 960, 1080)

    def test_reserve_and_center_main_and_stack(self, standard_area):
        definition = LayoutDefinition(reserve=Reserve.RESERVE_AND_CENTER)
        (main,) = compose_columns(standard_area, 1, definition)
        assert main.rect == Rect(480, 0, 960, 1080)

        main, stack = compose_columns(standard_area, 2, definition)
        assert main.rect == Rect(0, 0, 960, 1080)
        assert stack.rect == Rect(960, 0, 960, 1080)

    def test_columns_tile_container(self, standard_area, assert_tiles):
        definitions = [
            LayoutDefinition(),
            LayoutDefinition(main_size=0.3),
            center_main(),
            center_main(balance_stacks=False),
            center_main(reserve=Reserve.RESERVE),
        ]
        for definition in definitions:
            for count in range(3, 12):
                columns = compose_columns(standard_area, count, definition)
                assert_tiles([c.rect for c in columns], standard_area)

    def test_zero_windows(self, standard_area):
        assert compose_columns(standard_area, 0, LayoutDefinition()) == []

    def test_negative_windows_rejected(self, standard_area):
        with pytest.raises(ValueError):
            compose_columns(standard_area, -1, LayoutDefinition())

    def test_zero_sized_container(self):
        columns = compose_columns(Rect(0, 0, 0, 0), 3, center_main())
        assert sum(c.window_count for c in columns) == 3
        assert all(c.rect.surface_area() == 0 for c in columns)

    def test_container_offset(self):
        main, stack = compose_columns(Rect(100, 50, 800, 600), 2, LayoutDefinition())
        assert main.rect == Rect(100, 50, 400, 600)
        assert stack.rect == Rect(500, 50, 400, 600)


@pytest.mark.unit
class TestColumnModifiers:
    """Test the split, flip and rotation carried by each column."""

    def test_defaults(self, standard_area):
        for column in compose_columns(standard_area, 5, center_main()):
            assert column.flip == Flip.NONE
            assert column.rotation == Rotation.NORTH

    def test_each_column_gets_its_own_modifiers(self, standard_area):
        definition = center_main(
            main_split=Split.VERTICAL,
            stack_split=Split.HORIZONTAL,
            second_stack_split=Split.GRID,
            main_flip=Flip.HORIZONTAL,
            main_rotation=Rotation.EAST,
            stack_flip=Flip.VERTICAL,
            stack_rotation=Rotation.SOUTH,
            second_stack_flip=Flip.BOTH,
            second_stack_rotation=Rotation.WEST,
        )
        main, first, second = compose_columns(standard_area, 5, definition)
        assert (main.split, main.flip, main.rotation) == (
            Split.VERTICAL,
            Flip.HORIZONTAL,
            Rotation.EAST,
        )
        assert (first.split, first.flip, first.rotation) == (
            Split.HORIZONTAL,
            Flip.VERTICAL,
            Rotation.SOUTH,
        )
        assert (second.split, second.flip, second.rotation) == (
            Split.GRID,
            Flip.BOTH,
            Rotation.WEST,
        )

    def test_second_stack_split_defaults_to_stack_split(self, standard_area):
        definition = center_main(stack_split=Split.FIBONACCI)
        _, first, second = compose_columns(standard_area, 5, definition)
        assert first.split == Split.FIBONACCI
        assert second.split == Split.FIBONACCI

    def test_reserved_columns_keep_modifiers(self, standard_area):
        definition = center_main(
            reserve=Reserve.RESERVE,
            second_stack_split=Split.VERTICAL,
            second_stack_rotation=Rotation.EAST,
        )
        _, _, second = compose_columns(standard_area, 1, definition)
        assert second.window_count == 0
        assert second.split == Split.VERTICAL
        assert second.rotation == Rotation.EAST
