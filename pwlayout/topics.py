"""
Event Topics for pwlayout

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>

Command topics (cmd.*) tell the LayoutManager to do something, the remaining
topics are notifications the LayoutManager publishes after its state changed.
"""

# Layout commands
CMD_CYCLE_LAYOUT = "cmd.cycle_layout"
"""Command: Cycle to next layout."""

CMD_CYCLE_LAYOUT_REVERSE = "cmd.cycle_layout_reverse"
"""Command: Cycle to previous layout."""

CMD_SET_LAYOUT = "cmd.set_layout"
"""Command: Switch to a layout by name. Requires layout_name parameter."""

# Main column commands
CMD_INCREASE_MAIN_SIZE = "cmd.increase_main_size"
"""Command: Grow the main column by one step."""

CMD_DECREASE_MAIN_SIZE = "cmd.decrease_main_size"
"""Command: Shrink the main column by one step."""

CMD_INCREASE_MAIN_COUNT = "cmd.increase_main_count"
"""Command: Put one more window into the main column."""

CMD_DECREASE_MAIN_COUNT = "cmd.decrease_main_count"
"""Command: Put one window less into the main column."""

# Transform commands
CMD_FLIP_HORIZONTAL = "cmd.flip_horizontal"
"""Command: Toggle mirroring of the layout along the x axis."""

CMD_FLIP_VERTICAL = "cmd.flip_vertical"
"""Command: Toggle mirroring of the layout along the y axis."""

CMD_ROTATE_CLOCKWISE = "cmd.rotate_clockwise"
"""Command: Rotate the layout a quarter turn clockwise."""

CMD_ROTATE_COUNTER_CLOCKWISE = "cmd.rotate_counter_clockwise"
"""Command: Rotate the layout a quarter turn counter-clockwise."""

# Workspace commands
CMD_SWITCH_WORKSPACE = "cmd.switch_workspace"
"""Command: Switch to a workspace. Requires workspace_id parameter."""

# State notifications
LAYOUT_CHANGED = "layout.changed"
"""Published when the layout is changed (e.g., MainAndVertStack → Grid). Params: layout_name"""

MAIN_SIZE_CHANGED = "layout.main_size_changed"
"""Published when the main column was resized. Params: main_size"""

MAIN_COUNT_CHANGED = "layout.main_count_changed"
"""Published when the main window count changed. Params: main_window_count"""

WORKSPACE_SWITCHED = "workspace.switched"
"""Published when switching between workspaces. Params: current_workspace, old_workspace"""
