"""
Layout Definition and Manager

Provides the LayoutDefinition value consumed by the resolver, and the
LayoutManager that keeps the current layout of every workspace.
"""

from __future__ import annotations
import copy
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from pubsub import pub

from ..geometry import ColumnType, Flip, Rect, Reserve, Rotation, Size, Split

DEFAULT_MAIN_SIZE_STEP_PX = 50
DEFAULT_MAIN_SIZE_STEP_RATIO = 0.05


@dataclass
class LayoutDefinition:
    """
    Fully resolved set of parameters describing one layout.

    The definition is held by the caller (usually as the "current layout" of a
    workspace) and may be mutated between resolves through the accessors below.
    The resolver only ever reads it.
    """

    name: str = "Default"
    column_type: ColumnType = ColumnType.MAIN_AND_STACK

    # How the main column is subdivided. NONE caps the main column at one window.
    main_split: Split = Split.NONE
    stack_split: Split = Split.HORIZONTAL
    # CenterMain only, None uses stack_split
    second_stack_split: Optional[Split] = None

    # Target amount of windows in the main column, 0 disables the main column
    main_window_count: int = 1
    main_size: Size = field(default_factory=lambda: Size.ratio(0.5))

    # Whole layout
    flip: Flip = Flip.NONE
    rotation: Rotation = Rotation.NORTH
    reserve: Reserve = Reserve.NONE

    # Column arrangement only, the windows inside a column keep their order
    columns_flip: Flip = Flip.NONE
    columns_rotation: Rotation = Rotation.NORTH

    # Windows inside a single column
    main_flip: Flip = Flip.NONE
    main_rotation: Rotation = Rotation.NORTH
    stack_flip: Flip = Flip.NONE
    stack_rotation: Rotation = Rotation.NORTH
    second_stack_flip: Flip = Flip.NONE
    second_stack_rotation: Rotation = Rotation.NORTH

    # CenterMain only: share stack windows between both stacks
    balance_stacks: bool = True

    def __post_init__(self):
        """Validate counts and normalize the main size."""
        if self.main_window_count < 0:
            raise ValueError(
                f"Invalid main window count: {self.main_window_count}. Must be >= 0"
            )
        self.main_size = Size.coerce(self.main_size)

    @property
    def has_main(self) -> bool:
        """Whether the column type has a main column at all."""
        return self.column_type != ColumnType.STACK

    def get_main_window_count(self) -> Optional[int]:
        """Current main window count, None if the layout has no main column."""
        return self.main_window_count if self.has_main else None

    def get_main_size(self) -> Optional[Size]:
        """Current main column size, None if the layout has no main column."""
        return self.main_size if self.has_main else None

    def get_second_stack_split(self) -> Split:
        """Split of the second CenterMain stack."""
        if self.second_stack_split is None:
            return self.stack_split
        return self.second_stack_split

    def set_main_size(self, size: Union[Size, int, float]):
        """Replace the main size; ints are pixels, floats are ratios."""
        if not self.has_main:
            return
        self.main_size = Size.coerce(size)

    def change_main_size(self, delta: Union[int, float], upper_bound: Union[int, float]):
        """
        Grow or shrink the main column by `delta`.

        `delta` and `upper_bound` use the unit of the current size (pixels or
        ratio). The result is clamped to [0, upper_bound]. Layouts without a
        main column are left alone.
        """
        if not self.has_main:
            return
        self.main_size = self.main_size.changed_by(delta, upper_bound)

    def increase_main_size(
        self, upper_bound: Union[int, float], step: Optional[Union[int, float]] = None
    ):
        if step is None:
            step = self._default_size_step()
        self.change_main_size(step, upper_bound)

    def decrease_main_size(self, step: Optional[Union[int, float]] = None):
        if not self.has_main:
            return
        if step is None:
            step = self._default_size_step()
        # Shrinking never needs the upper bound, the current value is the max
        self.change_main_size(-step, self.main_size.value)

    def _default_size_step(self) -> Union[int, float]:
        if self.main_size.is_ratio:
            return DEFAULT_MAIN_SIZE_STEP_RATIO
        return DEFAULT_MAIN_SIZE_STEP_PX

    def set_main_window_count(self, count: int):
        if count < 0:
            raise ValueError(f"Invalid main window count: {count}. Must be >= 0")
        if self.has_main:
            self.main_window_count = count

    def increase_main_window_count(self):
        if self.has_main:
            self.main_window_count += 1

    def decrease_main_window_count(self):
        if self.has_main:
            self.main_window_count = max(0, self.main_window_count - 1)

    def toggle_flip_horizontal(self):
        self.flip = self.flip.toggle_horizontal()

    def toggle_flip_vertical(self):
        self.flip = self.flip.toggle_vertical()

    def rotate(self, clockwise: bool = True):
        if clockwise:
            self.rotation = self.rotation.clockwise()
        else:
            self.rotation = self.rotation.counter_clockwise()

    def is_monocle(self) -> bool:
        """Single unsplit stack: every window covers the whole workspace."""
        return self.column_type == ColumnType.STACK and self.stack_split == Split.NONE

    def is_main_and_deck(self) -> bool:
        """One main window next to a deck of windows covering each other."""
        return (
            self.column_type == ColumnType.MAIN_AND_STACK
            and self.main_split == Split.NONE
            and self.stack_split == Split.NONE
        )

    def copy(self) -> "LayoutDefinition":
        return copy.deepcopy(self)


@dataclass
class Workspace:
    """A workspace/tag and the layout it is currently using."""

    name: str
    layout: LayoutDefinition = field(default_factory=LayoutDefinition)


class LayoutManager:
    """
    Keeps the current layout of every workspace.

    This component subscribes to layout command events and publishes
    LAYOUT_CHANGED, MAIN_SIZE_CHANGED, MAIN_COUNT_CHANGED and
    WORKSPACE_SWITCHED events.

    Responsibilities:
    - CMD_CYCLE_LAYOUT / CMD_CYCLE_LAYOUT_REVERSE: Cycle through available layouts
    - CMD_SET_LAYOUT: Switch to a layout by name
    - CMD_INCREASE/DECREASE_MAIN_SIZE: Resize the main column
    - CMD_INCREASE/DECREASE_MAIN_COUNT: Change the main window count
    - CMD_FLIP_HORIZONTAL/VERTICAL: Mirror the layout
    - CMD_ROTATE_CLOCKWISE/COUNTER_CLOCKWISE: Rotate the layout
    - CMD_SWITCH_WORKSPACE: Switch to workspace
    """

    def __init__(self, bus, config=None):
        from ..config import LayoutConfig

        self.bus = bus
        self.config = config if config is not None else LayoutConfig()

        # Every workspace gets its own copy so resizing one leaves the others alone
        self.layouts: List[LayoutDefinition] = self.config.get_layouts()
        self.workspaces: Dict[int, Workspace] = {}
        self.active_workspace = 1

        for i in range(1, self.config.num_workspaces + 1):
            self.workspaces[i] = Workspace(
                name=str(i), layout=self._initial_layout().copy()
            )

        if self.config.debug:
            self.bus.subscribe(self.debug_event_logger, self.bus.ALL_TOPICS)

        self._setup_subscriptions()

    def _initial_layout(self) -> LayoutDefinition:
        for layout in self.layouts:
            if layout.name == self.config.default_layout:
                return layout
        if self.layouts:
            return self.layouts[0]
        return LayoutDefinition()

    def _setup_subscriptions(self):
        """Subscribe to events LayoutManager cares about."""
        from .. import topics

        # Layout command events
        self.bus.subscribe(self._on_cycle_layout, topics.CMD_CYCLE_LAYOUT)
        self.bus.subscribe(self._on_cycle_layout_reverse, topics.CMD_CYCLE_LAYOUT_REVERSE)
        self.bus.subscribe(self._on_set_layout, topics.CMD_SET_LAYOUT)
        self.bus.subscribe(self._on_increase_main_size, topics.CMD_INCREASE_MAIN_SIZE)
        self.bus.subscribe(self._on_decrease_main_size, topics.CMD_DECREASE_MAIN_SIZE)
        self.bus.subscribe(self._on_increase_main_count, topics.CMD_INCREASE_MAIN_COUNT)
        self.bus.subscribe(self._on_decrease_main_count, topics.CMD_DECREASE_MAIN_COUNT)
        self.bus.subscribe(self._on_flip_horizontal, topics.CMD_FLIP_HORIZONTAL)
        self.bus.subscribe(self._on_flip_vertical, topics.CMD_FLIP_VERTICAL)
        self.bus.subscribe(self._on_rotate_clockwise, topics.CMD_ROTATE_CLOCKWISE)
        self.bus.subscribe(
            self._on_rotate_counter_clockwise, topics.CMD_ROTATE_COUNTER_CLOCKWISE
        )

        # Workspace command events
        self.bus.subscribe(self._on_switch_workspace, topics.CMD_SWITCH_WORKSPACE)

    def debug_event_logger(self, topic=pub.AUTO_TOPIC, **kwargs):
        """Log all events published on the event bus."""
        timestamp = time.strftime("%H:%M:%S")
        topic_name = topic.getName()
        data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items() if k != "topic")
        print(f"[{timestamp}] EVENT: {topic_name} | {data_str}")

    def get_active_workspace(self) -> Workspace:
        """Get the active workspace."""
        return self.workspaces[self.active_workspace]

    @property
    def current_layout(self) -> LayoutDefinition:
        return self.get_active_workspace().layout

    def switch_workspace(self, workspace_id: int):
        """Switch to a different workspace."""
        from .. import topics

        if workspace_id not in self.workspaces:
            print(f"LayoutManager: Ignoring unknown workspace {workspace_id}")
            return

        old_workspace = self.active_workspace
        self.active_workspace = workspace_id
        self.bus.sendMessage(
            topics.WORKSPACE_SWITCHED,
            current_workspace=workspace_id,
            old_workspace=old_workspace,
        )

    def cycle_layout(self, direction: int = 1):
        """Cycle through available layouts."""
        if not self.layouts:
            return

        workspace = self.get_active_workspace()
        current_idx = 0
        for i, layout in enumerate(self.layouts):
            if layout.name == workspace.layout.name:
                current_idx = i
                break

        new_idx = (current_idx + direction) % len(self.layouts)
        self._use_layout(self.layouts[new_idx])

    def set_layout(self, layout_name: str) -> bool:
        """Switch the active workspace to the layout called `layout_name`."""
        for layout in self.layouts:
            if layout.name == layout_name:
                self._use_layout(layout)
                return True
        print(f"LayoutManager: Unknown layout '{layout_name}'")
        return False

    def _use_layout(self, layout: LayoutDefinition):
        from .. import topics

        workspace = self.get_active_workspace()
        workspace.layout = layout.copy()
        self.bus.sendMessage(topics.LAYOUT_CHANGED, layout_name=workspace.layout.name)

    def change_main_size(self, grow: bool):
        """Grow or shrink the main column of the active layout by one step."""
        from .. import topics

        layout = self.current_layout
        if not layout.has_main:
            return

        if layout.main_size.is_ratio:
            step = self.config.main_size_step_ratio
            upper_bound = 1.0
        else:
            step = self.config.main_size_step_px
            upper_bound = self.config.main_size_upper_bound

        if grow:
            layout.increase_main_size(upper_bound, step)
        else:
            layout.decrease_main_size(step)
        self.bus.sendMessage(topics.MAIN_SIZE_CHANGED, main_size=layout.main_size)

    def change_main_count(self, delta: int):
        """Add `delta` windows to the main column of the active layout."""
        from .. import topics

        layout = self.current_layout
        if not layout.has_main:
            return

        layout.set_main_window_count(max(0, layout.main_window_count + delta))
        self.bus.sendMessage(
            topics.MAIN_COUNT_CHANGED, main_window_count=layout.main_window_count
        )

    def calculate_layout(self, area: Rect, window_count: int) -> List[Rect]:
        """Calculate the window rects of the active workspace."""
        from .resolver import resolve

        return resolve(area, window_count, self.current_layout)

    # Command event handlers
    def _on_cycle_layout(self):
        """Handle CMD_CYCLE_LAYOUT command."""
        self.cycle_layout(direction=1)

    def _on_cycle_layout_reverse(self):
        """Handle CMD_CYCLE_LAYOUT_REVERSE command."""
        self.cycle_layout(direction=-1)

    def _on_set_layout(self, layout_name):
        """Handle CMD_SET_LAYOUT command."""
        self.set_layout(layout_name)

    def _on_increase_main_size(self):
        """Handle CMD_INCREASE_MAIN_SIZE command."""
        self.change_main_size(grow=True)

    def _on_decrease_main_size(self):
        """Handle CMD_DECREASE_MAIN_SIZE command."""
        self.change_main_size(grow=False)

    def _on_increase_main_count(self):
        """Handle CMD_INCREASE_MAIN_COUNT command."""
        self.change_main_count(1)

    def _on_decrease_main_count(self):
        """Handle CMD_DECREASE_MAIN_COUNT command."""
        self.change_main_count(-1)

    def _on_flip_horizontal(self):
        """Handle CMD_FLIP_HORIZONTAL command."""
        self.current_layout.toggle_flip_horizontal()

    def _on_flip_vertical(self):
        """Handle CMD_FLIP_VERTICAL command."""
        self.current_layout.toggle_flip_vertical()

    def _on_rotate_clockwise(self):
        """Handle CMD_ROTATE_CLOCKWISE command."""
        self.current_layout.rotate(clockwise=True)

    def _on_rotate_counter_clockwise(self):
        """Handle CMD_ROTATE_COUNTER_CLOCKWISE command."""
        self.current_layout.rotate(clockwise=False)

    def _on_switch_workspace(self, workspace_id):
        """Handle CMD_SWITCH_WORKSPACE command."""
        self.switch_workspace(workspace_id)
