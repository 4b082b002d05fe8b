#!/usr/bin/env python3
"""fchar frame replay: print boxes, kinematics and cancels of one action frame."""

import argparse
import json
import logging
import sys

from fchar_sim.controller import FrameController, ReplayConfig

logging.basicConfig(level=logging.INFO, format="%(asctime)s  %(levelname)-8s  %(message)s", datefmt="%H:%M:%S")


def _args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Replay one frame of a character action",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python main.py ryu.json --action-id 600 --frame 5\n"
            "  python main.py ryu.json --action 12 --frame 1 --json\n"
        ),
    )
    p.add_argument("asset", help="JSON export of a parsed .fchar asset")
    p.add_argument("--action", dest="action_index", type=int, default=None, help="action list index")
    p.add_argument("--action-id", type=int, default=None, help="action id (takes precedence)")
    p.add_argument("--frame", type=int, default=1, help="1-based frame")
    p.add_argument("--json", dest="as_json", action="store_true")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def _box(box) -> dict:
    return {"x": box.x, "y": box.y, "width": box.width, "height": box.height}


def snapshot(controller: FrameController) -> dict:
    summary = controller.action_summary()
    return {
        "action_index": controller.action_index,
        "frame": controller.frame,
        "summary": None if summary is None else {
            "action_id": summary.action_id,
            "frame_count": summary.frame_count,
            "first_active_frame": summary.first_active_frame,
            "recovery_frame": summary.recovery_frame,
            "end_frame": summary.end_frame,
            "loop_count": summary.loop_count,
        },
        "kinematics": controller.current_kinematic_state().to_dict(),
        "push": [{"condition": k.condition, "attribute": k.attribute, "box": _box(k.pushbox)}
                 for k in controller.active_push_boxes()],
        "damage": [{"collision_type": k.collision_type, "immune": k.immune, "level": k.level,
                    "type_flag": k.type_flag, "boxes": [_box(b) for b in k.boxes]}
                   for k in controller.active_damage_boxes()],
        "attack": [{"collision_type": k.collision_type, "hit_id": k.hit_id, "guard_bit": k.guard_bit,
                    "kind_flag": k.kind_flag, "hit_offset": list(k.hit_offset),
                    "boxes": [_box(b) for b in k.boxes]}
                   for k in controller.active_attack_boxes()],
        "triggers": [{"action": t.action, "condition_flag": t.condition_flag}
                     for t in controller.active_triggers()],
    }


def _print_text(controller: FrameController) -> None:
    summary = controller.action_summary()
    print(f"\nAction #{controller.action_index}: {summary.action_id}  "
          f"frame {controller.frame}/{summary.frame_count}")
    for line in summary.describe():
        print(f"  {line}")

    state = controller.current_kinematic_state()
    print(f"position    : {state.position.tolist()}")
    print(f"velocity    : {state.velocity.tolist()}")
    print(f"acceleration: {state.acceleration.tolist()}")
    print(f"root motion : {state.root_motion.tolist()}")

    for category, collision_type, bounds in controller.placed_boxes():
        print(f"{category:<7} type={collision_type}  "
              f"[{bounds.left:.1f}, {bounds.bottom:.1f}] → [{bounds.right:.1f}, {bounds.top:.1f}]")

    print("Cancel list:")
    for line in controller.describe_triggers():
        print(f"  {line}")


def run(config: ReplayConfig) -> int:
    controller = FrameController()
    if not controller.open_asset(config.asset_path):
        print(f"could not load {config.asset_path}", file=sys.stderr)
        return 1

    if config.action_id is not None:
        if not controller.select_action_by_id(config.action_id):
            print(f"no action with id {config.action_id}", file=sys.stderr)
            return 1
    else:
        index = config.action_index or 0
        if not 0 <= index < len(controller.asset.action_list):
            print(f"action index {index} out of range", file=sys.stderr)
            return 1
        controller.select_action(index)

    controller.set_frame(config.frame)
    if config.as_json:
        print(json.dumps(snapshot(controller), indent=2))
    else:
        _print_text(controller)
    return 0


def main(argv=None) -> int:
    args = _args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    config = ReplayConfig(
        asset_path=args.asset,
        action_index=args.action_index,
        action_id=args.action_id,
        frame=args.frame,
        as_json=args.as_json,
    )
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
