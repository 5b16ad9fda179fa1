"""
High School contextual events: freshman, junior and senior seasons.
"""

from typing import TYPE_CHECKING

from ...constants import GameMode
from ...shared.random_source import RandomSource, random_int
from ..base_event import Choice, ChoiceOutcome, ContextualPool, EventCategory, GameEvent, StatCost
from ..effects import apply_changes

if TYPE_CHECKING:
    from ...player.player import Player


def _outcome(player: 'Player', message: str) -> ChoiceOutcome:
    return ChoiceOutcome(updated_player=player, outcome_message=message)


def _contextual(event_id: str, title: str, description: str, *choices: Choice) -> GameEvent:
    return GameEvent(
        event_id=event_id,
        title=title,
        description=description,
        choices=tuple(choices),
        category=EventCategory.CONTEXTUAL,
    )


# ============================================================
# FRESHMAN
# ============================================================

def _laugh_it_off(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    if player.stats.charisma > 40 or rng.random() < 0.5:
        summary = apply_changes(player, [('morale', 5), ('charisma', 1)])
        return _outcome(player, f"You laughed it off. The team appreciated your good humor. {summary}")
    summary = apply_changes(player, [('morale', -5)])
    return _outcome(player, f"You laughed it off. It still felt a bit humiliating. {summary}")


def _get_annoyed(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('morale', -10), ('professionalism', -1)])
    return _outcome(player, f"You got visibly upset, which didn't help team chemistry. {summary}")


def _push_through(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('athleticism', 1), ('energy', -20)])
    return _outcome(player, f"You pushed through the tough practice. Felt like you got a bit stronger. {summary}")


def _pace_yourself(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('energy', -10)])
    return _outcome(player, f"You paced yourself to get through the practice. {summary}")


FRESHMAN_EVENTS = (
    _contextual(
        'hs_freshman_locker_prank', 'Locker Room Prank',
        "Some upperclassmen played a prank on you, hiding your practice jersey. It's a bit embarrassing.",
        Choice('laugh_it_off', 'Laugh it off (Charisma Check)', action=_laugh_it_off),
        Choice('get_annoyed', 'Get Annoyed', action=_get_annoyed),
    ),
    _contextual(
        'hs_freshman_first_big_practice', 'First Intense Practice',
        'Coach put the team through a grueling first full-contact practice. '
        'It was tougher than you expected.',
        Choice(
            'push_through', 'Push through it (+Athleticism, -Energy)',
            action=_push_through,
            cost=StatCost('energy', 10),
            disabled=lambda p: p.stats.energy < 25,
        ),
        Choice('pace_yourself', 'Pace yourself', action=_pace_yourself),
    ),
)


# ============================================================
# JUNIOR
# ============================================================

def _ignore_scout(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    if player.stats.professionalism > 50 and rng.random() < 0.75:
        summary = apply_changes(player, [('professionalism', 1), ('morale', 3)])
        return _outcome(player, f"You focused on the game plan. Your focus paid off. {summary}")
    summary = apply_changes(player, [('morale', -3)])
    return _outcome(player, f"You focused on the game plan. The rumor was a bit distracting. {summary}")


def _put_on_a_show(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    intro = 'You decided to play with a little extra flair.'
    if player.stats.charisma > 55 and rng.random() < 0.4:
        summary = apply_changes(player, [('basketball_iq', -random_int(rng, 1, 2))])
        return _outcome(player, f"{intro} You made a few flashy but poor decisions. {summary}")
    summary = apply_changes(player, [('shooting', random_int(rng, 1, 2))])
    return _outcome(player, f"{intro} Your confidence was infectious, and you hit some tough shots. {summary}")


def _go_to_party(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [
        ('charisma', random_int(rng, 1, 2)),
        ('professionalism', -random_int(rng, 1, 2)),
    ])
    return _outcome(
        player,
        "You had a great time at the party and made some new friends, "
        f"but you felt a step slow in practice the next day. {summary}"
    )


def _skip_party(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('professionalism', random_int(rng, 1, 2))])
    return _outcome(
        player,
        f"You skipped the party to focus on basketball. The coaches noticed your dedication. {summary}"
    )


def _talk_back(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    if player.stats.charisma > 60 and rng.random() < 0.6:
        summary = apply_changes(player, [('morale', random_int(rng, 3, 7))])
        return _outcome(player, f"You engaged in a war of words. Your comeback was legendary! {summary}")
    summary = apply_changes(player, [('morale', -random_int(rng, 3, 7))])
    return _outcome(player, f"You engaged in a war of words. You probably should have just stayed quiet. {summary}")


def _ignore_rival(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    gain = 1 if rng.random() < 0.75 else 2
    summary = apply_changes(player, [('professionalism', gain)])
    return _outcome(player, f"You took the high road and ignored the noise. {summary}")


def _hit_the_books(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    iq_gain = 1 if rng.random() < 0.6 else 0
    summary = apply_changes(player, [('professionalism', 2), ('basketball_iq', iq_gain)])
    return _outcome(
        player,
        f"You spent the week catching up on schoolwork. Your grades are back on track. {summary}"
    )


def _ask_for_tutoring(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    if player.stats.charisma > 50 or rng.random() < 0.5:
        summary = apply_changes(player, [('morale', random_int(rng, 3, 6))])
        return _outcome(
            player,
            f"You asked the captain for help. They were happy to help, and you both learned something. {summary}"
        )
    summary = apply_changes(player, [('morale', -random_int(rng, 2, 3))])
    return _outcome(
        player,
        f"You asked the captain for help. It was a little awkward, but you got the help you needed. {summary}"
    )


def _embrace_growth(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('athleticism', random_int(rng, 1, 2)), ('energy', 5)])
    return _outcome(player, f"You feel stronger and more imposing on the court. {summary}")


def _shoot_through_it(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    intro = 'You lived in the gym trying to find your rhythm again.'
    if player.stats.professionalism > 60 and rng.random() < 0.7:
        summary = apply_changes(player, [('shooting', 1)])
        return _outcome(player, f"{intro} You finally broke through the slump! {summary}")
    summary = apply_changes(player, [('morale', -3)])
    return _outcome(player, f"{intro} The slump continues, and the frustration is mounting. {summary}")


def _mental_break(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('morale', random_int(rng, 4, 7))])
    return _outcome(
        player,
        f"You took a day to relax and came back to practice feeling refreshed. {summary}"
    )


JUNIOR_EVENTS = (
    _contextual(
        'hs_junior_scout_rumor', 'Scout in the Stands',
        'A rumor is going around that a scout from a small local college is at the game tonight. '
        'The pressure feels a little higher than usual.',
        Choice('ignore_scout', 'Ignore it and play your game', action=_ignore_scout),
        Choice('try_to_impress', 'Try to put on a show (Risky)', action=_put_on_a_show),
    ),
    _contextual(
        'hs_junior_party_invite', 'Weekend Party',
        'A popular senior is throwing a big party the night before a practice. Going could be fun '
        'and good for your social standing, but it might affect your performance.',
        Choice('go_to_party', 'Go to the party', action=_go_to_party),
        Choice('skip_party', 'Skip it and get some rest', action=_skip_party),
    ),
    _contextual(
        'hs_junior_rival_trash_talk', 'Rival Trash Talk',
        'The star player from your rival school finds you online and starts talking trash '
        'about the upcoming game.',
        Choice('talk_back', 'Fire back with some trash talk of your own.', action=_talk_back),
        Choice('ignore_rival', 'Ignore it. "Actions speak louder than words."', action=_ignore_rival),
    ),
    _contextual(
        'hs_junior_grades_slipping', 'Grades are Slipping',
        'Your focus on basketball has caused your grades to slip. The coach pulls you aside and '
        'warns you about academic eligibility.',
        Choice('hit_the_books', 'Dedicate extra time to studying.', action=_hit_the_books),
        Choice('ask_teammate_for_help', 'Ask the team captain for tutoring help.', action=_ask_for_tutoring),
    ),
    _contextual(
        'hs_junior_growth_spurt', 'Growth Spurt',
        'You hit a growth spurt over the summer and are now a couple of inches taller.',
        Choice('embrace_growth', 'Awesome! Time to work on my new frame.', action=_embrace_growth),
    ),
    _contextual(
        'hs_junior_slump', 'Shooting Slump',
        "You've hit a wall. For the last week, your shot just hasn't been falling in practice.",
        Choice('shoot_through_it', 'Spend extra hours in the gym.', action=_shoot_through_it),
        Choice('mental_break', 'Take a day off from shooting to clear your head.', action=_mental_break),
    ),
)


# ============================================================
# SENIOR
# ============================================================

def _focus_on_apps(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [
        ('professionalism', random_int(rng, 1, 2)),
        ('morale', -random_int(rng, 2, 4)),
    ])
    return _outcome(
        player,
        f"You spent the night on essays instead of jump shots. Responsible, but draining. {summary}"
    )


def _procrastinate_apps(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    shooting_gain = 1 if rng.random() < 0.75 else 0
    summary = apply_changes(player, [
        ('shooting', shooting_gain),
        ('professionalism', -random_int(rng, 1, 2)),
    ])
    return _outcome(player, f"Basketball comes first. The applications pile up. {summary}")


def _go_to_prom(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [
        ('morale', random_int(rng, 10, 20)),
        ('charisma', 1 if rng.random() < 0.5 else 2),
        ('energy', -15),
    ])
    return _outcome(
        player,
        f"You had an unforgettable night, but staying out late took its toll. {summary}"
    )


def _skip_prom(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [
        ('professionalism', random_int(rng, 2, 3)),
        ('morale', -random_int(rng, 3, 6)),
    ])
    return _outcome(
        player,
        "Your sacrifice for the team was noted by everyone, "
        f"but you can't help feeling like you missed out. {summary}"
    )


def _feel_the_emotion(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('morale', random_int(rng, 5, 10))])
    return _outcome(
        player,
        f"The emotion of the night fuels you. You feel a deep connection to your hometown and team. {summary}"
    )


def _cherish_moment(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('morale', random_int(rng, 8, 12)), ('charisma', 1)])
    return _outcome(
        player,
        f"The message from your captain is a huge confidence booster. {summary}"
    )


def _cram_for_exams(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    gain = 2 if rng.random() < player.stats.professionalism / 100 else 1
    summary = apply_changes(player, [('professionalism', gain), ('energy', -15)])
    return _outcome(player, f"The all-nighter got you through, barely. {summary}")


def _balance_study(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    gain = 2 if rng.random() < player.stats.basketball_iq / 100 else 1
    summary = apply_changes(player, [('basketball_iq', gain)])
    return _outcome(player, f"Balancing the books and the court sharpened your mind. {summary}")


def _feel_nostalgic(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('morale', random_int(rng, 3, 7))])
    return _outcome(player, f"It's been a long road. You feel a mix of sadness and excitement. {summary}")


def _feel_anxious(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('morale', -random_int(rng, 3, 7))])
    return _outcome(player, f"Not knowing what comes next is starting to get to you. {summary}")


def _attend_workout(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    skill_check = (player.stats.shooting + player.stats.athleticism + player.stats.basketball_iq) / 300
    if rng.random() < skill_check:
        summary = apply_changes(player, [('professionalism', 2), ('morale', 8), ('energy', -15)])
        return _outcome(player, f"You impressed the college coaches. They'll be in touch. {summary}")
    summary = apply_changes(player, [('professionalism', 1), ('morale', -4), ('energy', -15)])
    return _outcome(player, f"You held your own, but nobody seemed blown away. {summary}")


def _join_prank(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [
        ('charisma', random_int(rng, 1, 2)),
        ('professionalism', -(1 if rng.random() < 0.5 else 2)),
    ])
    return _outcome(
        player,
        f"The prank was hilarious and you feel closer to your classmates. {summary}"
    )


def _stay_out_of_it(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('professionalism', 1 if rng.random() < 0.5 else 2)])
    return _outcome(
        player,
        f"You decide to stay out of it, not wanting to risk any trouble before graduation. {summary}"
    )


def _mentor_freshman(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('charisma', random_int(rng, 1, 2)), ('basketball_iq', 1)])
    return _outcome(
        player,
        f"Teaching the game forced you to understand it better yourself. {summary}"
    )


def _brush_off_freshman(player: 'Player', rng: RandomSource) -> ChoiceOutcome:
    summary = apply_changes(player, [('charisma', -random_int(rng, 1, 2))])
    return _outcome(player, f"You brush off the request. Your focus is elsewhere. {summary}")


SENIOR_EVENTS = (
    _contextual(
        'hs_senior_college_apps', 'College Application Stress',
        'Application deadlines are piling up right in the middle of the season.',
        Choice('focus_on_apps', 'Take a night off from the gym to focus on applications.', action=_focus_on_apps),
        Choice('procrastinate_apps', 'Basketball is your ticket. The apps can wait.', action=_procrastinate_apps),
    ),
    _contextual(
        'hs_senior_prom', 'Prom Night',
        'Prom is the night before a big game.',
        Choice('go_to_prom', 'You only get one senior prom. Go and have fun.', action=_go_to_prom),
        Choice('skip_prom', 'Skip prom. The team needs you at 100%.', action=_skip_prom),
    ),
    _contextual(
        'hs_senior_last_home_game', 'Last Regular Season Home Game',
        'Senior night. Your family walks you onto the court before tip-off.',
        Choice('feel_the_emotion', 'Soak it all in. This is what you worked for.', action=_feel_the_emotion),
    ),
    _contextual(
        'hs_senior_yearbook', 'Yearbook Signing',
        'Your captain writes a long note in your yearbook about what you meant to the team.',
        Choice('cherish_moment', "Acknowledge how far you've come.", action=_cherish_moment),
    ),
    _contextual(
        'hs_senior_final_exam', 'Final Exams',
        'Finals week lands right on top of the playoff push.',
        Choice('cram_for_exams', 'Pull an all-nighter to study.', action=_cram_for_exams),
        Choice('balance_study_hoops', 'Find a balance between studying and practice.', action=_balance_study),
    ),
    _contextual(
        'hs_senior_future_talk', 'Talk of the Future',
        'Everyone in the locker room is talking about where they will be next year.',
        Choice('feel_nostalgic', 'Get nostalgic about your time here.', action=_feel_nostalgic),
        Choice('feel_anxious', 'Feel anxious about the uncertainty.', action=_feel_anxious),
    ),
    _contextual(
        'hs_senior_workout_invite', 'College Workout Invite',
        'A college program invites you to an open workout on campus.',
        Choice(
            'attend_workout', "Attend the workout and show them what you've got.",
            action=_attend_workout,
            cost=StatCost('energy', 15),
        ),
    ),
    _contextual(
        'hs_senior_prank', 'Senior Prank',
        "It's time for the annual senior prank. Do you participate?",
        Choice('join_prank', 'Of course. It is tradition.', action=_join_prank),
        Choice('stay_out_of_it', 'Sit this one out.', action=_stay_out_of_it),
    ),
    _contextual(
        'hs_senior_mentor_freshman', 'Mentor a Freshman',
        'A freshman on the team is struggling, and the coach asks you to mentor them.',
        Choice('mentor', 'Take them under your wing.', action=_mentor_freshman),
        Choice('brush_off', 'You have your own season to worry about.', action=_brush_off_freshman),
    ),
)


HIGH_SCHOOL_POOLS = (
    ContextualPool('hs_freshman', GameMode.HIGH_SCHOOL, FRESHMAN_EVENTS,
                   lambda p: p.current_season_in_mode == 1),
    ContextualPool('hs_junior', GameMode.HIGH_SCHOOL, JUNIOR_EVENTS,
                   lambda p: p.current_season_in_mode == 3),
    ContextualPool('hs_senior', GameMode.HIGH_SCHOOL, SENIOR_EVENTS,
                   lambda p: p.current_season_in_mode >= 4),
)
