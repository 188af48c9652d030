"""Handler for 'scrumdo report'."""

from scrumdo.cli._common import open_session_or_die, output_json, sprint_summary


def report(args) -> int:
    """Show sprint history with velocity figures."""
    session = open_session_or_die(args.repo, args.json)
    summary = session.history_summary

    if args.json:
        output_json(
            {
                **summary,
                "recent_velocities": session.recent_velocities,
                "average_velocity": session.average_velocity,
                "history": [sprint_summary(s) for s in session.history],
            }
        )
        return 0

    if not session.history:
        print("no finished sprints yet")
        return 0

    print(f"{summary['sprints']} sprints, {summary['completed_points']}pt completed")
    velocities = ", ".join(f"{v:.1f}" for v in session.recent_velocities)
    print(f"Velocity: {velocities} (average {session.average_velocity:.1f} pt/day)")
    # Newest first
    for sprint in reversed(session.history):
        rate = round(sprint.completion_rate * 100)
        print(
            f"  {sprint.date_range}  {sprint.completed_points:>3}/{sprint.total_points:<3}pt"
            f"  {rate:>3}%  {sprint.daily_velocity:.1f} pt/day"
        )
    return 0
