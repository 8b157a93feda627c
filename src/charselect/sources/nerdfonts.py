from __future__ import annotations
from typing import Iterable, Tuple

from ..models import CharSelectGroup

# /* ~~~ (name, code point) for every glyph in the Nerd Fonts 3.4.0
#        glyphnames.json, sorted by id. Names follow the upstream
#        `<set>-<glyph>` ids with the `nf-` prefix dropped and the set
#        separator written as `_` (nf-dev-git -> dev_git). Most code points
#        sit in the private-use areas; a few (iec_*, oct_heart, oct_zap)
#        reuse standard symbols. ~~~ */
NERD_FONT_GLYPHS: tuple[tuple[str, int], ...] = (
    ("cod_account", 0xEB99),
    ("cod_activate_breakpoints", 0xEA97),
    ("cod_add", 0xEA60),
    ("cod_archive", 0xEA98),
    ("cod_arrow_both", 0xEA99),
    ("cod_arrow_circle_down", 0xEBFC),
    ("cod_arrow_circle_left", 0xEBFD),
    ("cod_arrow_circle_right", 0xEBFE),
    ("cod_arrow_circle_up", 0xEBFF),
    ("cod_arrow_down", 0xEA9A),
    ("cod_arrow_left", 0xEA9B),
    ("cod_arrow_right", 0xEA9C),
    ("cod_arrow_small_down", 0xEA9D),
    ("cod_arrow_small_left", 0xEA9E),
    ("cod_arrow_small_right", 0xEA9F),
    ("cod_arrow_small_up", 0xEAA0),
    ("cod_arrow_swap", 0xEBCB),
    ("cod_arrow_up", 0xEAA1),
    ("cod_azure", 0xEBD8),
    ("cod_azure_devops", 0xEBE8),
    ("cod_beaker", 0xEA79),
    ("cod_beaker_stop", 0xEBE1),
    ("cod_bell", 0xEAA2),
    ("cod_bell_dot", 0xEB9A),
    ("cod_bell_slash", 0xEC08),
    ("cod_bell_slash_dot", 0xEC09),
    ("cod_blank", 0xEC03),
    ("cod_bold", 0xEAA3),
    ("cod_book", 0xEAA4),
    ("cod_bookmark", 0xEAA5),
    ("cod_bracket_dot", 0xEBE5),
    ("cod_bracket_error", 0xEBE6),
    ("cod_briefcase", 0xEAAC),
    ("cod_broadcast", 0xEAAD),
    ("cod_browser", 0xEAAE),
    ("cod_bug", 0xEAAF),
    ("cod_calendar", 0xEAB0),
    ("cod_call_incoming", 0xEB92),
    ("cod_call_outgoing", 0xEB93),
    ("cod_case_sensitive", 0xEAB1),
    ("cod_check", 0xEAB2),
    ("cod_check_all", 0xEBB1),
    ("cod_checklist", 0xEAB3),
    ("cod_chevron_down", 0xEAB4),
    ("cod_chevron_left", 0xEAB5),
    ("cod_chevron_right", 0xEAB6),
    ("cod_chevron_up", 0xEAB7),
    ("cod_chip", 0xEC19),
    ("cod_chrome_close", 0xEAB8),
    ("cod_chrome_maximize", 0xEAB9),
    ("cod_chrome_minimize", 0xEABA),
    ("cod_chrome_restore", 0xEABB),
    ("cod_circle", 0xEABC),
    ("cod_circle_filled", 0xEA71),
    ("cod_circle_large", 0xEBB5),
    ("cod_circle_large_filled", 0xEBB4),
    ("cod_circle_slash", 0xEABD),
    ("cod_circle_small", 0xEC07),
    ("cod_circle_small_filled", 0xEB8A),
    ("cod_circuit_board", 0xEABE),
    ("cod_clear_all", 0xEABF),
    ("cod_clippy", 0xEAC0),
    ("cod_close", 0xEA76),
    ("cod_close_all", 0xEAC1),
    ("cod_cloud", 0xEBAA),
    ("cod_cloud_download", 0xEAC2),
    ("cod_cloud_upload", 0xEAC3),
    ("cod_code", 0xEAC4),
    ("cod_coffee", 0xEC15),
    ("cod_collapse_all", 0xEAC5),
    ("cod_color_mode", 0xEAC6),
    ("cod_combine", 0xEBB6),
    ("cod_comment", 0xEA6B),
    ("cod_comment_discussion", 0xEAC7),
    ("cod_comment_draft", 0xEC0E),
    ("cod_comment_unresolved", 0xEC0A),
    ("cod_compass", 0xEBD5),
    ("cod_compass_active", 0xEBD7),
    ("cod_compass_dot", 0xEBD6),
    ("cod_copilot", 0xEC1E),
    ("cod_copy", 0xEBCC),
    ("cod_credit_card", 0xEAC9),
    ("cod_dash", 0xEACC),
    ("cod_dashboard", 0xEACD),
    ("cod_database", 0xEACE),
    ("cod_debug", 0xEAD8),
    ("cod_debug_all", 0xEBDC),
    ("cod_debug_alt", 0xEB91),
    ("cod_debug_alt_small", 0xEBA8),
    ("cod_debug_breakpoint_conditional", 0xEAA7),
    ("cod_debug_breakpoint_conditional_unverified", 0xEAA6),
    ("cod_debug_breakpoint_data", 0xEAA9),
    ("cod_debug_breakpoint_data_unverified", 0xEAA8),
    ("cod_debug_breakpoint_function", 0xEB88),
    ("cod_debug_breakpoint_function_unverified", 0xEB87),
    ("cod_debug_breakpoint_log", 0xEAAB),
    ("cod_debug_breakpoint_log_unverified", 0xEAAA),
    ("cod_debug_breakpoint_unsupported", 0xEB8C),
    ("cod_debug_console", 0xEB9B),
    ("cod_debug_continue", 0xEACF),
    ("cod_debug_continue_small", 0xEBE0),
    ("cod_debug_coverage", 0xEBDD),
    ("cod_debug_disconnect", 0xEAD0),
    ("cod_debug_line_by_line", 0xEBD0),
    ("cod_debug_pause", 0xEAD1),
    ("cod_debug_rerun", 0xEBC0),
    ("cod_debug_restart", 0xEAD2),
    ("cod_debug_restart_frame", 0xEB90),
    ("cod_debug_reverse_continue", 0xEB8E),
    ("cod_debug_stackframe", 0xEB8B),
    ("cod_debug_stackframe_active", 0xEB89),
    ("cod_debug_start", 0xEAD3),
    ("cod_debug_step_back", 0xEB8F),
    ("cod_debug_step_into", 0xEAD4),
    ("cod_debug_step_out", 0xEAD5),
    ("cod_debug_step_over", 0xEAD6),
    ("cod_debug_stop", 0xEAD7),
    ("cod_desktop_download", 0xEA78),
    ("cod_device_camera", 0xEADA),
    ("cod_device_camera_video", 0xEAD9),
    ("cod_device_mobile", 0xEADB),
    ("cod_diff", 0xEAE1),
    ("cod_diff_added", 0xEADC),
    ("cod_diff_ignored", 0xEADD),
    ("cod_diff_modified", 0xEADE),
    ("cod_diff_removed", 0xEADF),
    ("cod_diff_renamed", 0xEAE0),
    ("cod_discard", 0xEAE2),
    ("cod_edit", 0xEA73),
    ("cod_editor_layout", 0xEAE3),
    ("cod_ellipsis", 0xEA7C),
    ("cod_empty_window", 0xEAE4),
    ("cod_error", 0xEA87),
    ("cod_error_small", 0xEBFB),
    ("cod_exclude", 0xEAE5),
    ("cod_expand_all", 0xEB95),
    ("cod_export", 0xEBAC),
    ("cod_extensions", 0xEAE6),
    ("cod_eye", 0xEA70),
    ("cod_eye_closed", 0xEAE7),
    ("cod_feedback", 0xEB96),
    ("cod_file", 0xEA7B),
    ("cod_file_binary", 0xEAE8),
    ("cod_file_code", 0xEAE9),
    ("cod_file_media", 0xEAEA),
    ("cod_file_pdf", 0xEAEB),
    ("cod_file_submodule", 0xEAEC),
    ("cod_file_symlink_directory", 0xEAED),
    ("cod_file_symlink_file", 0xEAEE),
    ("cod_file_zip", 0xEAEF),
    ("cod_files", 0xEAF0),
    ("cod_filter", 0xEAF1),
    ("cod_filter_filled", 0xEBCE),
    ("cod_flame", 0xEAF2),
    ("cod_fold", 0xEAF5),
    ("cod_fold_down", 0xEAF3),
    ("cod_fold_up", 0xEAF4),
    ("cod_folder", 0xEA83),
    ("cod_folder_active", 0xEAF6),
    ("cod_folder_library", 0xEBDF),
    ("cod_folder_opened", 0xEAF7),
    ("cod_game", 0xEC17),
    ("cod_gear", 0xEAF8),
    ("cod_gift", 0xEAF9),
    ("cod_gist_secret", 0xEAFA),
    ("cod_git_commit", 0xEAFC),
    ("cod_git_compare", 0xEAFD),
    ("cod_git_fetch", 0xEC1D),
    ("cod_git_merge", 0xEAFE),
    ("cod_git_pull_request", 0xEA64),
    ("cod_git_pull_request_closed", 0xEBDA),
    ("cod_git_pull_request_create", 0xEBBC),
    ("cod_git_pull_request_draft", 0xEBDB),
    ("cod_git_pull_request_go_to_changes", 0xEC0B),
    ("cod_git_pull_request_new_changes", 0xEC0C),
    ("cod_github", 0xEA84),
    ("cod_github_action", 0xEAFF),
    ("cod_github_alt", 0xEB00),
    ("cod_github_inverted", 0xEBA1),
    ("cod_globe", 0xEB01),
    ("cod_go_to_file", 0xEA94),
    ("cod_grabber", 0xEB02),
    ("cod_graph", 0xEB03),
    ("cod_graph_left", 0xEBAD),
    ("cod_graph_line", 0xEBE2),
    ("cod_graph_scatter", 0xEBE3),
    ("cod_gripper", 0xEB04),
    ("cod_group_by_ref_type", 0xEB97),
    ("cod_heart", 0xEB05),
    ("cod_heart_filled", 0xEC04),
    ("cod_history", 0xEA82),
    ("cod_home", 0xEB06),
    ("cod_horizontal_rule", 0xEB07),
    ("cod_hubot", 0xEB08),
    ("cod_inbox", 0xEB09),
    ("cod_indent", 0xEBF9),
    ("cod_info", 0xEA74),
    ("cod_insert", 0xEC11),
    ("cod_inspect", 0xEBD1),
    ("cod_issue_draft", 0xEBD9),
    ("cod_issue_reopened", 0xEB0B),
    ("cod_issues", 0xEB0C),
    ("cod_italic", 0xEB0D),
    ("cod_jersey", 0xEB0E),
    ("cod_json", 0xEB0F),
    ("cod_kebab_vertical", 0xEB10),
    ("cod_key", 0xEB11),
    ("cod_law", 0xEB12),
    ("cod_layers", 0xEBD2),
    ("cod_layers_active", 0xEBD4),
    ("cod_layers_dot", 0xEBD3),
    ("cod_layout", 0xEBEB),
    ("cod_layout_activitybar_left", 0xEBEC),
    ("cod_layout_activitybar_right", 0xEBED),
    ("cod_layout_centered", 0xEBF7),
    ("cod_layout_menubar", 0xEBF6),
    ("cod_layout_panel", 0xEBF2),
    ("cod_layout_panel_center", 0xEBEF),
    ("cod_layout_panel_justify", 0xEBF0),
    ("cod_layout_panel_left", 0xEBEE),
    ("cod_layout_panel_off", 0xEC01),
    ("cod_layout_panel_right", 0xEBF1),
    ("cod_layout_sidebar_left", 0xEBF3),
    ("cod_layout_sidebar_left_off", 0xEC02),
    ("cod_layout_sidebar_right", 0xEBF4),
    ("cod_layout_sidebar_right_off", 0xEC00),
    ("cod_layout_statusbar", 0xEBF5),
    ("cod_library", 0xEB9C),
    ("cod_lightbulb", 0xEA61),
    ("cod_lightbulb_autofix", 0xEB13),
    ("cod_link", 0xEB15),
    ("cod_link_external", 0xEB14),
    ("cod_list_filter", 0xEB83),
    ("cod_list_flat", 0xEB84),
    ("cod_list_ordered", 0xEB16),
    ("cod_list_selection", 0xEB85),
    ("cod_list_tree", 0xEB86),
    ("cod_list_unordered", 0xEB17),
    ("cod_live_share", 0xEB18),
    ("cod_loading", 0xEB19),
    ("cod_location", 0xEB1A),
    ("cod_lock", 0xEA75),
    ("cod_lock_small", 0xEBE7),
    ("cod_magnet", 0xEBAE),
    ("cod_mail", 0xEB1C),
    ("cod_mail_read", 0xEB1B),
    ("cod_map", 0xEC05),
    ("cod_map_filled", 0xEC06),
    ("cod_markdown", 0xEB1D),
    ("cod_megaphone", 0xEB1E),
    ("cod_mention", 0xEB1F),
    ("cod_menu", 0xEB94),
    ("cod_merge", 0xEBAB),
    ("cod_mic", 0xEC12),
    ("cod_mic_filled", 0xEC1C),
    ("cod_milestone", 0xEB20),
    ("cod_mirror", 0xEA69),
    ("cod_mortar_board", 0xEB21),
    ("cod_move", 0xEB22),
    ("cod_multiple_windows", 0xEB23),
    ("cod_music", 0xEC1B),
    ("cod_mute", 0xEB24),
    ("cod_new_file", 0xEA7F),
    ("cod_new_folder", 0xEA80),
    ("cod_newline", 0xEBEA),
    ("cod_no_newline", 0xEB25),
    ("cod_note", 0xEB26),
    ("cod_notebook", 0xEBAF),
    ("cod_notebook_template", 0xEBBF),
    ("cod_octoface", 0xEB27),
    ("cod_open_preview", 0xEB28),
    ("cod_organization", 0xEA7E),
    ("cod_output", 0xEB9D),
    ("cod_package", 0xEB29),
    ("cod_paintcan", 0xEB2A),
    ("cod_pass", 0xEBA4),
    ("cod_pass_filled", 0xEBB3),
    ("cod_person", 0xEA67),
    ("cod_person_add", 0xEBCD),
    ("cod_piano", 0xEC1A),
    ("cod_pie_chart", 0xEBE4),
    ("cod_pin", 0xEB2B),
    ("cod_pinned", 0xEBA0),
    ("cod_pinned_dirty", 0xEBB2),
    ("cod_play", 0xEB2C),
    ("cod_play_circle", 0xEBA6),
    ("cod_plug", 0xEB2D),
    ("cod_preserve_case", 0xEB2E),
    ("cod_preview", 0xEB2F),
    ("cod_primitive_square", 0xEA72),
    ("cod_project", 0xEB30),
    ("cod_pulse", 0xEB31),
    ("cod_question", 0xEB32),
    ("cod_quote", 0xEB33),
    ("cod_radio_tower", 0xEB34),
    ("cod_reactions", 0xEB35),
    ("cod_record", 0xEBA7),
    ("cod_record_keys", 0xEA65),
    ("cod_record_small", 0xEBFA),
    ("cod_redo", 0xEBB0),
    ("cod_references", 0xEB36),
    ("cod_refresh", 0xEB37),
    ("cod_regex", 0xEB38),
    ("cod_remote", 0xEB3A),
    ("cod_remote_explorer", 0xEB39),
    ("cod_remove", 0xEB3B),
    ("cod_replace", 0xEB3D),
    ("cod_replace_all", 0xEB3C),
    ("cod_reply", 0xEA7D),
    ("cod_repo", 0xEA62),
    ("cod_repo_clone", 0xEB3E),
    ("cod_repo_force_push", 0xEB3F),
    ("cod_repo_forked", 0xEA63),
    ("cod_repo_pull", 0xEB40),
    ("cod_repo_push", 0xEB41),
    ("cod_report", 0xEB42),
    ("cod_request_changes", 0xEB43),
    ("cod_rocket", 0xEB44),
    ("cod_root_folder", 0xEB46),
    ("cod_root_folder_opened", 0xEB45),
    ("cod_rss", 0xEB47),
    ("cod_ruby", 0xEB48),
    ("cod_run_above", 0xEBBD),
    ("cod_run_all", 0xEB9E),
    ("cod_run_below", 0xEBBE),
    ("cod_run_errors", 0xEBDE),
    ("cod_save", 0xEB4B),
    ("cod_save_all", 0xEB49),
    ("cod_save_as", 0xEB4A),
    ("cod_screen_full", 0xEB4C),
    ("cod_screen_normal", 0xEB4D),
    ("cod_search", 0xEA6D),
    ("cod_search_fuzzy", 0xEC0D),
    ("cod_search_stop", 0xEB4E),
    ("cod_send", 0xEC0F),
    ("cod_server", 0xEB50),
    ("cod_server_environment", 0xEBA3),
    ("cod_server_process", 0xEBA2),
    ("cod_settings", 0xEB52),
    ("cod_settings_gear", 0xEB51),
    ("cod_shield", 0xEB53),
    ("cod_sign_in", 0xEA6F),
    ("cod_sign_out", 0xEA6E),
    ("cod_smiley", 0xEB54),
    ("cod_snake", 0xEC16),
    ("cod_sort_precedence", 0xEB55),
    ("cod_source_control", 0xEA68),
    ("cod_sparkle", 0xEC10),
    ("cod_split_horizontal", 0xEB56),
    ("cod_split_vertical", 0xEB57),
    ("cod_squirrel", 0xEB58),
    ("cod_star_empty", 0xEA6A),
    ("cod_star_full", 0xEB59),
    ("cod_star_half", 0xEB5A),
    ("cod_stop_circle", 0xEBA5),
    ("cod_symbol_array", 0xEA8A),
    ("cod_symbol_boolean", 0xEA8F),
    ("cod_symbol_class", 0xEB5B),
    ("cod_symbol_color", 0xEB5C),
    ("cod_symbol_constant", 0xEB5D),
    ("cod_symbol_enum", 0xEA95),
    ("cod_symbol_enum_member", 0xEB5E),
    ("cod_symbol_event", 0xEA86),
    ("cod_symbol_field", 0xEB5F),
    ("cod_symbol_file", 0xEB60),
    ("cod_symbol_interface", 0xEB61),
    ("cod_symbol_key", 0xEA93),
    ("cod_symbol_keyword", 0xEB62),
    ("cod_symbol_method", 0xEA8C),
    ("cod_symbol_misc", 0xEB63),
    ("cod_symbol_namespace", 0xEA8B),
    ("cod_symbol_numeric", 0xEA90),
    ("cod_symbol_operator", 0xEB64),
    ("cod_symbol_parameter", 0xEA92),
    ("cod_symbol_property", 0xEB65),
    ("cod_symbol_ruler", 0xEA96),
    ("cod_symbol_snippet", 0xEB66),
    ("cod_symbol_string", 0xEB8D),
    ("cod_symbol_structure", 0xEA91),
    ("cod_symbol_variable", 0xEA88),
    ("cod_sync", 0xEA77),
    ("cod_sync_ignored", 0xEB9F),
    ("cod_table", 0xEBB7),
    ("cod_tag", 0xEA66),
    ("cod_target", 0xEBF8),
    ("cod_tasklist", 0xEB67),
    ("cod_telescope", 0xEB68),
    ("cod_terminal", 0xEA85),
    ("cod_terminal_bash", 0xEBCA),
    ("cod_terminal_cmd", 0xEBC4),
    ("cod_terminal_debian", 0xEBC5),
    ("cod_terminal_linux", 0xEBC6),
    ("cod_terminal_powershell", 0xEBC7),
    ("cod_terminal_tmux", 0xEBC8),
    ("cod_terminal_ubuntu", 0xEBC9),
    ("cod_text_size", 0xEB69),
    ("cod_three_bars", 0xEB6A),
    ("cod_thumbsdown", 0xEB6B),
    ("cod_thumbsdown_filled", 0xEC13),
    ("cod_thumbsup", 0xEB6C),
    ("cod_thumbsup_filled", 0xEC14),
    ("cod_tools", 0xEB6D),
    ("cod_trash", 0xEA81),
    ("cod_triangle_down", 0xEB6E),
    ("cod_triangle_left", 0xEB6F),
    ("cod_triangle_right", 0xEB70),
    ("cod_triangle_up", 0xEB71),
    ("cod_twitter", 0xEB72),
    ("cod_type_hierarchy", 0xEBB9),
    ("cod_type_hierarchy_sub", 0xEBBA),
    ("cod_type_hierarchy_super", 0xEBBB),
    ("cod_unfold", 0xEB73),
    ("cod_ungroup_by_ref_type", 0xEB98),
    ("cod_unlock", 0xEB74),
    ("cod_unmute", 0xEB75),
    ("cod_unverified", 0xEB76),
    ("cod_variable_group", 0xEBB8),
    ("cod_verified", 0xEB77),
    ("cod_verified_filled", 0xEBE9),
    ("cod_versions", 0xEB78),
    ("cod_vm", 0xEA7A),
    ("cod_vm_active", 0xEB79),
    ("cod_vm_connect", 0xEBA9),
    ("cod_vm_outline", 0xEB7A),
    ("cod_vm_running", 0xEB7B),
    ("cod_vr", 0xEC18),
    ("cod_wand", 0xEBCF),
    ("cod_warning", 0xEA6C),
    ("cod_watch", 0xEB7C),
    ("cod_whitespace", 0xEB7D),
    ("cod_whole_word", 0xEB7E),
    ("cod_window", 0xEB7F),
    ("cod_word_wrap", 0xEB80),
    ("cod_workspace_trusted", 0xEBC1),
    ("cod_workspace_unknown", 0xEBC3),
    ("cod_workspace_untrusted", 0xEBC2),
    ("cod_zoom_in", 0xEB81),
    ("cod_zoom_out", 0xEB82),
    ("custom_ada", 0xE6B5),
    ("custom_asm", 0xE6AB),
    ("custom_astro", 0xE6B3),
    ("custom_bazel", 0xE63A),
    ("custom_c", 0xE61E),
    ("custom_chuck", 0xE6B6),
    ("custom_common_lisp", 0xE6B0),
    ("custom_cpp", 0xE61D),
    ("custom_crystal", 0xE62F),
    ("custom_css", 0xE6B8),
    ("custom_default", 0xE612),
    ("custom_electron", 0xE62E),
    ("custom_elixir", 0xE62D),
    ("custom_elm", 0xE62C),
    ("custom_emacs", 0xE632),
    ("custom_fennel", 0xE6AF),
    ("custom_firebase", 0xE657),
    ("custom_folder", 0xE5FF),
    ("custom_folder_config", 0xE5FC),
    ("custom_folder_git", 0xE5FB),
    ("custom_folder_git_branch", 0xE5FB),
    ("custom_folder_github", 0xE5FD),
    ("custom_folder_npm", 0xE5FA),
    ("custom_folder_oct", 0xE6AD),
    ("custom_folder_open", 0xE5FE),
    ("custom_go", 0xE626),
    ("custom_home", 0xE617),
    ("custom_kotlin", 0xE634),
    ("custom_msdos", 0xE629),
    ("custom_neovim", 0xE6AE),
    ("custom_orgmode", 0xE633),
    ("custom_play_arrow", 0xE602),
    ("custom_prettier", 0xE6B4),
    ("custom_puppet", 0xE631),
    ("custom_purescript", 0xE630),
    ("custom_ruby", 0xE605),
    ("custom_scheme", 0xE6B1),
    ("custom_toml", 0xE6B2),
    ("custom_v_lang", 0xE6AC),
    ("custom_vim", 0xE62B),
    ("custom_vitruvian", 0xE6B7),
    ("custom_windows", 0xE62A),
    ("dev_aarch64", 0xE700),
    ("dev_adonisjs", 0xE701),
    ("dev_aftereffects", 0xE705),
    ("dev_akka", 0xE708),
    ("dev_algolia", 0xE70A),
    ("dev_alpinejs", 0xE713),
    ("dev_amazonwebservices", 0xE7AD),
    ("dev_anaconda", 0xE715),
    ("dev_android", 0xE70E),
    ("dev_androidstudio", 0xE71A),
    ("dev_angular", 0xE753),
    ("dev_angularjs", 0xE71C),
    ("dev_angularmaterial", 0xE720),
    ("dev_ansible", 0xE723),
    ("dev_antdesign", 0xE72A),
    ("dev_apache", 0xE72B),
    ("dev_apacheairflow", 0xE72C),
    ("dev_apachekafka", 0xE72E),
    ("dev_apachespark", 0xE72F),
    ("dev_apl", 0xE730),
    ("dev_appcelerator", 0xE7AB),
    ("dev_apple", 0xE711),
    ("dev_appwrite", 0xE731),
    ("dev_archlinux", 0xE732),
    ("dev_arduino", 0xE733),
    ("dev_argocd", 0xE734),
    ("dev_astro", 0xE735),
    ("dev_atom", 0xE764),
    ("dev_awk", 0xE741),
    ("dev_aws", 0xE7AD),
    ("dev_axios", 0xE74F),
    ("dev_azure", 0xE754),
    ("dev_azuredevops", 0xE756),
    ("dev_azuresqldatabase", 0xE75B),
    ("dev_babel", 0xE75D),
    ("dev_backbone", 0xE752),
    ("dev_backbonejs", 0xE752),
    ("dev_ballerina", 0xE75E),
    ("dev_bamboo", 0xE75F),
    ("dev_bash", 0xE760),
    ("dev_beats", 0xE761),
    ("dev_behance", 0xE762),
    ("dev_bitbucket", 0xE703),
    ("dev_blazor", 0xE765),
    ("dev_blender", 0xE766),
    ("dev_bootstrap", 0xE747),
    ("dev_bower", 0xE74D),
    ("dev_browserstack", 0xE76B),
    ("dev_bulma", 0xE76C),
    ("dev_bun", 0xE76F),
    ("dev_c", 0xE771),
    ("dev_c_lang", 0xE771),
    ("dev_cairo", 0xE773),
    ("dev_cakephp", 0xE77A),
    ("dev_canva", 0xE77C),
    ("dev_capacitor", 0xE785),
    ("dev_carbon", 0xE788),
    ("dev_cassandra", 0xE789),
    ("dev_centos", 0xE78A),
    ("dev_ceylon", 0xE78B),
    ("dev_chrome", 0xE743),
    ("dev_circleci", 0xE78C),
    ("dev_clarity", 0xE78D),
    ("dev_clion", 0xE78E),
    ("dev_clojure", 0xE768),
    ("dev_clojure_alt", 0xE76A),
    ("dev_clojurescript", 0xE790),
    ("dev_cloudflare", 0xE792),
    ("dev_cloudflareworkers", 0xE793),
    ("dev_cmake", 0xE794),
    ("dev_codeac", 0xE796),
    ("dev_codecov", 0xE797),
    ("dev_codeigniter", 0xE780),
    ("dev_codepen", 0xE716),
    ("dev_coffeescript", 0xE751),
    ("dev_composer", 0xE783),
    ("dev_confluence", 0xE799),
    ("dev_consul", 0xE79A),
    ("dev_contao", 0xE79B),
    ("dev_corejs", 0xE79D),
    ("dev_cosmosdb", 0xE79F),
    ("dev_couchbase", 0xE7A0),
    ("dev_couchdb", 0xE7A2),
    ("dev_cplusplus", 0xE7A3),
    ("dev_crystal", 0xE7AC),
    ("dev_csharp", 0xE7B2),
    ("dev_css3", 0xE749),
    ("dev_css3_full", 0xE74A),
    ("dev_cucumber", 0xE7B7),
    ("dev_cypressio", 0xE7B9),
    ("dev_d3js", 0xE7BC),
    ("dev_dart", 0xE798),
    ("dev_database", 0xE706),
    ("dev_datagrip", 0xE7BD),
    ("dev_dataspell", 0xE7BE),
    ("dev_dbeaver", 0xE7BF),
    ("dev_debian", 0xE77D),
    ("dev_denojs", 0xE7C0),
    ("dev_devicon", 0xE7C1),
    ("dev_digital_ocean", 0xE7AE),
    ("dev_digitalocean", 0xE7AE),
    ("dev_discordjs", 0xE7C2),
    ("dev_django", 0xE71D),
    ("dev_djangorest", 0xE7C3),
    ("dev_dlang", 0xE7AF),
    ("dev_docker", 0xE7B0),
    ("dev_doctrine", 0xE774),
    ("dev_dotnet", 0xE77F),
    ("dev_dotnetcore", 0xE7C6),
    ("dev_dreamweaver", 0xE79C),
    ("dev_dropbox", 0xE707),
    ("dev_dropwizard", 0xE7C7),
    ("dev_drupal", 0xE742),
    ("dev_dynamodb", 0xE7C8),
    ("dev_eclipse", 0xE79E),
    ("dev_ecto", 0xE7C9),
    ("dev_elasticsearch", 0xE7CA),
    ("dev_electron", 0xE7CB),
    ("dev_eleventy", 0xE7CC),
    ("dev_elixir", 0xE7CD),
    ("dev_elm", 0xE7CE),
    ("dev_emacs", 0xE7CF),
    ("dev_embeddedc", 0xE7D0),
    ("dev_ember", 0xE71B),
    ("dev_envoy", 0xE7D1),
    ("dev_erlang", 0xE7B1),
    ("dev_eslint", 0xE7D2),
    ("dev_express", 0xE7D3),
    ("dev_facebook", 0xE7D4),
    ("dev_fastapi", 0xE7D5),
    ("dev_fastify", 0xE7D6),
    ("dev_faunadb", 0xE7D7),
    ("dev_feathersjs", 0xE7D8),
    ("dev_fedora", 0xE7D9),
    ("dev_figma", 0xE7DA),
    ("dev_filezilla", 0xE7DB),
    ("dev_firebase", 0xE787),
    ("dev_firefox", 0xE745),
    ("dev_flask", 0xE7DC),
    ("dev_flutter", 0xE7DD),
    ("dev_fortran", 0xE7DE),
    ("dev_foundation", 0xE7DF),
    ("dev_framermotion", 0xE7E0),
    ("dev_framework7", 0xE7E1),
    ("dev_fsharp", 0xE7A7),
    ("dev_gatling", 0xE7E2),
    ("dev_gatsby", 0xE7E3),
    ("dev_gazebo", 0xE7E4),
    ("dev_gcc", 0xE7E5),
    ("dev_gentoo", 0xE7E6),
    ("dev_ghost", 0xE71F),
    ("dev_ghost_small", 0xE714),
    ("dev_gimp", 0xE7E7),
    ("dev_git", 0xE702),
    ("dev_git_branch", 0xE725),
    ("dev_git_commit", 0xE729),
    ("dev_git_compare", 0xE728),
    ("dev_git_merge", 0xE727),
    ("dev_git_pull_request", 0xE726),
    ("dev_gitbook", 0xE7E8),
    ("dev_github", 0xE709),
    ("dev_github_badge", 0xE709),
    ("dev_github_full", 0xE717),
    ("dev_githubactions", 0xE7E9),
    ("dev_githubcodespaces", 0xE7EA),
    ("dev_gitlab", 0xE7EB),
    ("dev_gitpod", 0xE7EC),
    ("dev_gitter", 0xE7ED),
    ("dev_gnu", 0xE779),
    ("dev_go", 0xE724),
    ("dev_godot", 0xE7EE),
    ("dev_goland", 0xE7EF),
    ("dev_google", 0xE7F0),
    ("dev_googlecloud", 0xE7F1),
    ("dev_gradle", 0xE7F2),
    ("dev_grafana", 0xE7F3),
    ("dev_grails", 0xE7B3),
    ("dev_graphql", 0xE7F4),
    ("dev_groovy", 0xE775),
    ("dev_grpc", 0xE7F5),
    ("dev_grunt", 0xE74C),
    ("dev_gulp", 0xE763),
    ("dev_hadoop", 0xE7F6),
    ("dev_handlebars", 0xE7F7),
    ("dev_hardhat", 0xE7F8),
    ("dev_harvester", 0xE7F9),
    ("dev_haskell", 0xE777),
    ("dev_haxe", 0xE7FA),
    ("dev_helm", 0xE7FB),
    ("dev_heroku", 0xE77B),
    ("dev_hibernate", 0xE7FC),
    ("dev_homebrew", 0xE7FD),
    ("dev_html5", 0xE736),
    ("dev_hugo", 0xE7FE),
    ("dev_ie", 0xE744),
    ("dev_ifttt", 0xE7FF),
    ("dev_illustrator", 0xE7B4),
    ("dev_influxdb", 0xE800),
    ("dev_inkscape", 0xE801),
    ("dev_insomnia", 0xE802),
    ("dev_intellij", 0xE7B5),
    ("dev_ionic", 0xE7A9),
    ("dev_jaegertracing", 0xE803),
    ("dev_jamstack", 0xE804),
    ("dev_jasmine", 0xE805),
    ("dev_java", 0xE738),
    ("dev_javascript", 0xE781),
    ("dev_javascript_alt", 0xE74E),
    ("dev_javascript_badge", 0xE781),
    ("dev_jeet", 0xE806),
    ("dev_jekyll", 0xE70D),
    ("dev_jekyll_small", 0xE70D),
    ("dev_jenkins", 0xE767),
    ("dev_jest", 0xE807),
    ("dev_jetbrains", 0xE808),
    ("dev_jetpackcompose", 0xE809),
    ("dev_jira", 0xE75C),
    ("dev_jiraalign", 0xE80A),
    ("dev_jquery", 0xE750),
    ("dev_json", 0xE80B),
    ("dev_jule", 0xE80C),
    ("dev_julia", 0xE80D),
    ("dev_junit", 0xE80E),
    ("dev_jupyter", 0xE80F),
    ("dev_k3os", 0xE810),
    ("dev_k3s", 0xE811),
    ("dev_k6", 0xE812),
    ("dev_kaggle", 0xE813),
    ("dev_karatelabs", 0xE814),
    ("dev_karma", 0xE815),
    ("dev_kdeneon", 0xE816),
    ("dev_keras", 0xE817),
    ("dev_kibana", 0xE818),
    ("dev_knexjs", 0xE819),
    ("dev_knockout", 0xE81A),
    ("dev_kotlin", 0xE81B),
    ("dev_krakenjs", 0xE784),
    ("dev_krakenjs_badge", 0xE784),
    ("dev_ktor", 0xE81C),
    ("dev_kubernetes", 0xE81D),
    ("dev_labview", 0xE81E),
    ("dev_laravel", 0xE73F),
    ("dev_latex", 0xE81F),
    ("dev_less", 0xE758),
    ("dev_linkedin", 0xE820),
    ("dev_linux", 0xE712),
    ("dev_liquibase", 0xE821),
    ("dev_livewire", 0xE822),
    ("dev_llvm", 0xE823),
    ("dev_lodash", 0xE824),
    ("dev_logstash", 0xE825),
    ("dev_lua", 0xE826),
    ("dev_lumen", 0xE827),
    ("dev_magento", 0xE740),
    ("dev_mariadb", 0xE828),
    ("dev_markdown", 0xE73E),
    ("dev_materializecss", 0xE7B6),
    ("dev_materialui", 0xE829),
    ("dev_matlab", 0xE82A),
    ("dev_matplotlib", 0xE82B),
    ("dev_maven", 0xE82C),
    ("dev_maya", 0xE82D),
    ("dev_meteor", 0xE7A5),
    ("dev_meteorfull", 0xE7A6),
    ("dev_microsoftsqlserver", 0xE82E),
    ("dev_minitab", 0xE82F),
    ("dev_mithril", 0xE830),
    ("dev_mobx", 0xE831),
    ("dev_mocha", 0xE832),
    ("dev_modx", 0xE833),
    ("dev_moleculer", 0xE834),
    ("dev_mongodb", 0xE7A4),
    ("dev_mongoose", 0xE835),
    ("dev_moodle", 0xE836),
    ("dev_mootools_badge", 0xE78F),
    ("dev_mozilla", 0xE786),
    ("dev_msdos", 0xE837),
    ("dev_mysql", 0xE704),
    ("dev_nano", 0xE838),
    ("dev_neo4j", 0xE839),
    ("dev_neovim", 0xE83A),
    ("dev_nestjs", 0xE83B),
    ("dev_netlify", 0xE83C),
    ("dev_networkx", 0xE83D),
    ("dev_nextjs", 0xE83E),
    ("dev_nginx", 0xE776),
    ("dev_ngrx", 0xE83F),
    ("dev_nhibernate", 0xE840),
    ("dev_nim", 0xE841),
    ("dev_nimble", 0xE842),
    ("dev_nixos", 0xE843),
    ("dev_nodejs", 0xE719),
    ("dev_nodejs_small", 0xE718),
    ("dev_nodemon", 0xE844),
    ("dev_nodewebkit", 0xE845),
    ("dev_nomad", 0xE846),
    ("dev_norg", 0xE847),
    ("dev_notion", 0xE848),
    ("dev_npm", 0xE71E),
    ("dev_nuget", 0xE849),
    ("dev_numpy", 0xE84A),
    ("dev_nuxtjs", 0xE84B),
    ("dev_oauth", 0xE84C),
    ("dev_objectivec", 0xE84D),
    ("dev_ocaml", 0xE84E),
    ("dev_ohmyzsh", 0xE84F),
    ("dev_okta", 0xE850),
    ("dev_openal", 0xE851),
    ("dev_openapi", 0xE852),
    ("dev_opencl", 0xE853),
    ("dev_opencv", 0xE854),
    ("dev_opengl", 0xE855),
    ("dev_openstack", 0xE856),
    ("dev_opensuse", 0xE857),
    ("dev_opentelemetry", 0xE858),
    ("dev_opera", 0xE746),
    ("dev_oracle", 0xE859),
    ("dev_ory", 0xE85A),
    ("dev_p5js", 0xE85B),
    ("dev_packer", 0xE85C),
    ("dev_pandas", 0xE85D),
    ("dev_perl", 0xE769),
    ("dev_pfsense", 0xE85E),
    ("dev_phalcon", 0xE85F),
    ("dev_phoenix", 0xE860),
    ("dev_photonengine", 0xE861),
    ("dev_photoshop", 0xE7B8),
    ("dev_php", 0xE73D),
    ("dev_phpstorm", 0xE862),
    ("dev_playwright", 0xE863),
    ("dev_plotly", 0xE864),
    ("dev_pnpm", 0xE865),
    ("dev_podman", 0xE866),
    ("dev_poetry", 0xE867),
    ("dev_polygon", 0xE868),
    ("dev_portainer", 0xE869),
    ("dev_postcss", 0xE86A),
    ("dev_postgresql", 0xE76E),
    ("dev_postman", 0xE86B),
    ("dev_powershell", 0xE86C),
    ("dev_premierepro", 0xE86D),
    ("dev_prisma", 0xE86E),
    ("dev_processing", 0xE86F),
    ("dev_prolog", 0xE7A1),
    ("dev_prometheus", 0xE870),
    ("dev_protractor", 0xE871),
    ("dev_pulsar", 0xE872),
    ("dev_pulumi", 0xE873),
    ("dev_puppeteer", 0xE874),
    ("dev_purescript", 0xE875),
    ("dev_putty", 0xE876),
    ("dev_pycharm", 0xE877),
    ("dev_pypi", 0xE878),
    ("dev_pyscript", 0xE879),
    ("dev_pytest", 0xE87A),
    ("dev_python", 0xE73C),
    ("dev_pytorch", 0xE87B),
    ("dev_qodana", 0xE87C),
    ("dev_qt", 0xE87D),
    ("dev_quarkus", 0xE87E),
    ("dev_quasar", 0xE87F),
    ("dev_qwik", 0xE880),
    ("dev_r", 0xE881),
    ("dev_rabbitmq", 0xE882),
    ("dev_rails", 0xE73B),
    ("dev_railway", 0xE883),
    ("dev_rancher", 0xE884),
    ("dev_raspberry_pi", 0xE722),
    ("dev_reach", 0xE885),
    ("dev_react", 0xE7BA),
    ("dev_reactbootstrap", 0xE886),
    ("dev_reactnavigation", 0xE887),
    ("dev_reactrouter", 0xE888),
    ("dev_readthedocs", 0xE889),
    ("dev_realm", 0xE88A),
    ("dev_rect", 0xE88B),
    ("dev_redhat", 0xE7BB),
    ("dev_redis", 0xE76D),
    ("dev_redux", 0xE88C),
    ("dev_renpy", 0xE88D),
    ("dev_replit", 0xE88E),
    ("dev_requirejs", 0xE770),
    ("dev_rider", 0xE88F),
    ("dev_rocksdb", 0xE890),
    ("dev_rockylinux", 0xE891),
    ("dev_rollup", 0xE892),
    ("dev_ros", 0xE893),
    ("dev_rspec", 0xE894),
    ("dev_rstudio", 0xE895),
    ("dev_ruby", 0xE739),
    ("dev_ruby_on_rails", 0xE73B),
    ("dev_ruby_rough", 0xE791),
    ("dev_rubymine", 0xE896),
    ("dev_rust", 0xE7A8),
    ("dev_rxjs", 0xE897),
    ("dev_safari", 0xE748),
    ("dev_salesforce", 0xE898),
    ("dev_sanity", 0xE899),
    ("dev_sass", 0xE74B),
    ("dev_scala", 0xE737),
    ("dev_scalingo", 0xE89A),
    ("dev_scikitlearn", 0xE89B),
    ("dev_sdl", 0xE89C),
    ("dev_selenium", 0xE89D),
    ("dev_sema", 0xE89E),
    ("dev_sentry", 0xE89F),
    ("dev_sequelize", 0xE8A0),
    ("dev_shopware", 0xE8A1),
    ("dev_shotgrid", 0xE8A2),
    ("dev_sketch", 0xE8A3),
    ("dev_slack", 0xE8A4),
    ("dev_smashing_magazine", 0xE72D),
    ("dev_socketio", 0xE8A5),
    ("dev_solidity", 0xE8A6),
    ("dev_solidjs", 0xE8A7),
    ("dev_sonarqube", 0xE8A8),
    ("dev_sourcetree", 0xE8A9),
    ("dev_spack", 0xE8AA),
    ("dev_splunk", 0xE8AB),
    ("dev_spring", 0xE8AC),
    ("dev_spss", 0xE8AD),
    ("dev_spyder", 0xE8AE),
    ("dev_sqlalchemy", 0xE8AF),
    ("dev_sqldeveloper", 0xE8B0),
    ("dev_sqlite", 0xE7C4),
    ("dev_ssh", 0xE8B1),
    ("dev_stackoverflow", 0xE710),
    ("dev_stata", 0xE8B2),
    ("dev_storybook", 0xE8B3),
    ("dev_streamlit", 0xE8B4),
    ("dev_stylus", 0xE759),
    ("dev_sublime", 0xE7AA),
    ("dev_subversion", 0xE8B5),
    ("dev_supabase", 0xE8B6),
    ("dev_svelte", 0xE8B7),
    ("dev_swagger", 0xE8B8),
    ("dev_swift", 0xE755),
    ("dev_swiper", 0xE8B9),
    ("dev_symfony", 0xE757),
    ("dev_symfony_badge", 0xE757),
    ("dev_tailwindcss", 0xE8BA),
    ("dev_tauri", 0xE8BB),
    ("dev_tensorflow", 0xE8BC),
    ("dev_terminal", 0xE795),
    ("dev_terraform", 0xE8BD),
    ("dev_tex", 0xE8BE),
    ("dev_thealgorithms", 0xE8BF),
    ("dev_threedsmax", 0xE8C0),
    ("dev_threejs", 0xE8C1),
    ("dev_titaniumsdk", 0xE8C2),
    ("dev_tomcat", 0xE8C3),
    ("dev_tortoisegit", 0xE8C4),
    ("dev_towergit", 0xE8C5),
    ("dev_traefikmesh", 0xE8C6),
    ("dev_traefikproxy", 0xE8C7),
    ("dev_travis", 0xE77E),
    ("dev_trello", 0xE75A),
    ("dev_trpc", 0xE8C8),
    ("dev_twitter", 0xE8C9),
    ("dev_typescript", 0xE8CA),
    ("dev_typo3", 0xE772),
    ("dev_ubuntu", 0xE73A),
    ("dev_uml", 0xE8CB),
    ("dev_unifiedmodelinglanguage", 0xE8CB),
    ("dev_unity", 0xE721),
    ("dev_unity_small", 0xE721),
    ("dev_unix", 0xE8CC),
    ("dev_unrealengine", 0xE8CD),
    ("dev_uwsgi", 0xE8CE),
    ("dev_v8", 0xE8CF),
    ("dev_vagrant", 0xE8D0),
    ("dev_vala", 0xE8D1),
    ("dev_vault", 0xE8D2),
    ("dev_vercel", 0xE8D3),
    ("dev_vertx", 0xE8D4),
    ("dev_vim", 0xE7C5),
    ("dev_visualbasic", 0xE8D5),
    ("dev_visualstudio", 0xE70C),
    ("dev_vite", 0xE8D6),
    ("dev_vitejs", 0xE8D7),
    ("dev_vitess", 0xE8D8),
    ("dev_vitest", 0xE8D9),
    ("dev_vscode", 0xE8DA),
    ("dev_vsphere", 0xE8DB),
    ("dev_vuejs", 0xE8DC),
    ("dev_vuestorefront", 0xE8DD),
    ("dev_vuetify", 0xE8DE),
    ("dev_vyper", 0xE8DF),
    ("dev_wasm", 0xE8E0),
    ("dev_webflow", 0xE8E1),
    ("dev_weblate", 0xE8E2),
    ("dev_webpack", 0xE8E3),
    ("dev_webstorm", 0xE8E4),
    ("dev_windows", 0xE70F),
    ("dev_windows11", 0xE8E5),
    ("dev_woocommerce", 0xE8E6),
    ("dev_wordpress", 0xE70B),
    ("dev_xamarin", 0xE8E7),
    ("dev_xcode", 0xE8E8),
    ("dev_xd", 0xE8E9),
    ("dev_xml", 0xE8EA),
    ("dev_yaml", 0xE8EB),
    ("dev_yarn", 0xE8EC),
    ("dev_yii", 0xE782),
    ("dev_yugabytedb", 0xE8ED),
    ("dev_yunohost", 0xE8EE),
    ("dev_zend", 0xE778),
    ("dev_zig", 0xE8EF),
    ("extra_progress_empty_left", 0xEE00),
    ("extra_progress_empty_mid", 0xEE01),
    ("extra_progress_empty_right", 0xEE02),
    ("extra_progress_full_left", 0xEE03),
    ("extra_progress_full_mid", 0xEE04),
    ("extra_progress_full_right", 0xEE05),
    ("extra_progress_spinner_1", 0xEE06),
    ("extra_progress_spinner_2", 0xEE07),
    ("extra_progress_spinner_3", 0xEE08),
    ("extra_progress_spinner_4", 0xEE09),
    ("extra_progress_spinner_5", 0xEE0A),
    ("extra_progress_spinner_6", 0xEE0B),
    ("fa_500px", 0xF26E),
    ("fa_accessible_icon", 0xF29B),
    ("fa_accusoft", 0xF0B7),
    ("fa_address_book", 0xF2B9),
    ("fa_address_book_o", 0xF2BA),
    ("fa_address_card", 0xF2BB),
    ("fa_address_card_o", 0xF2BC),
    ("fa_adjust", 0xF042),
    ("fa_adn", 0xF170),
    ("fa_adversal", 0xF0B8),
    ("fa_affiliatetheme", 0xF0B9),
    ("fa_airbnb", 0xEF93),
    ("fa_algolia", 0xF0BA),
    ("fa_align_center", 0xF037),
    ("fa_align_justify", 0xF039),
    ("fa_align_left", 0xF036),
    ("fa_align_right", 0xF038),
    ("fa_alipay", 0xEEBC),
    ("fa_amazon", 0xF270),
    ("fa_amazon_pay", 0xED56),
    ("fa_ambulance", 0xF0F9),
    ("fa_american_sign_language_interpreting", 0xF2A3),
    ("fa_amilia", 0xF0BB),
    ("fa_anchor", 0xF13D),
    ("fa_android", 0xF17B),
    ("fa_angellist", 0xF209),
    ("fa_angle_double_down", 0xF103),
    ("fa_angle_double_left", 0xF100),
    ("fa_angle_double_right", 0xF101),
    ("fa_angle_double_up", 0xF102),
    ("fa_angle_down", 0xF107),
    ("fa_angle_left", 0xF104),
    ("fa_angle_right", 0xF105),
    ("fa_angle_up", 0xF106),
    ("fa_angles_down", 0xF103),
    ("fa_angles_left", 0xF100),
    ("fa_angles_right", 0xF101),
    ("fa_angles_up", 0xF102),
    ("fa_angrycreative", 0xF0BC),
    ("fa_angular", 0xED4B),
    ("fa_ankh", 0xEEBD),
    ("fa_app_store", 0xF0BD),
    ("fa_app_store_ios", 0xF0BE),
    ("fa_apper", 0xF0BF),
    ("fa_apple", 0xF179),
    ("fa_apple_pay", 0xED41),
    ("fa_apple_whole", 0xEE98),
    ("fa_archive", 0xF187),
    ("fa_archway", 0xEE20),
    ("fa_area_chart", 0xF1FE),
    ("fa_arrow_circle_down", 0xF0AB),
    ("fa_arrow_circle_left", 0xF0A8),
    ("fa_arrow_circle_o_down", 0xF01A),
    ("fa_arrow_circle_o_left", 0xF190),
    ("fa_arrow_circle_o_right", 0xF18E),
    ("fa_arrow_circle_o_up", 0xF01B),
    ("fa_arrow_circle_right", 0xF0A9),
    ("fa_arrow_circle_up", 0xF0AA),
    ("fa_arrow_down", 0xF063),
    ("fa_arrow_down_1_9", 0xF162),
    ("fa_arrow_down_9_1", 0xEFB1),
    ("fa_arrow_down_a_z", 0xF15D),
    ("fa_arrow_down_long", 0xF175),
    ("fa_arrow_down_short_wide", 0xEFAF),
    ("fa_arrow_down_wide_short", 0xF160),
    ("fa_arrow_down_z_a", 0xEFAD),
    ("fa_arrow_left", 0xF060),
    ("fa_arrow_left_long", 0xF177),
    ("fa_arrow_pointer", 0xF245),
    ("fa_arrow_right", 0xF061),
    ("fa_arrow_right_arrow_left", 0xF0EC),
    ("fa_arrow_right_from_bracket", 0xF08B),
    ("fa_arrow_right_long", 0xF178),
    ("fa_arrow_right_to_bracket", 0xF090),
    ("fa_arrow_rotate_left", 0xF0E2),
    ("fa_arrow_rotate_right", 0xF01E),
    ("fa_arrow_turn_down", 0xF149),
    ("fa_arrow_turn_up", 0xF148),
    ("fa_arrow_up", 0xF062),
    ("fa_arrow_up_1_9", 0xF163),
    ("fa_arrow_up_9_1", 0xEFB2),
    ("fa_arrow_up_a_z", 0xF15E),
    ("fa_arrow_up_long", 0xF176),
    ("fa_arrow_up_right_from_square", 0xF08E),
    ("fa_arrow_up_short_wide", 0xEFB0),
    ("fa_arrow_up_wide_short", 0xF161),
    ("fa_arrow_up_z_a", 0xEFAE),
    ("fa_arrows", 0xF047),
    ("fa_arrows_alt", 0xF0B2),
    ("fa_arrows_h", 0xF07E),
    ("fa_arrows_left_right", 0xF07E),
    ("fa_arrows_rotate", 0xF021),
    ("fa_arrows_up_down", 0xF07D),
    ("fa_arrows_up_down_left_right", 0xF047),
    ("fa_arrows_v", 0xF07D),
    ("fa_artstation", 0xEF31),
    ("fa_asl_interpreting", 0xF2A3),
    ("fa_assistive_listening_systems", 0xF2A2),
    ("fa_asterisk", 0xF069),
    ("fa_asymmetrik", 0xF0CF),
    ("fa_at", 0xF1FA),
    ("fa_atlassian", 0xEF32),
    ("fa_atom", 0xEE99),
    ("fa_audible", 0xF0DF),
    ("fa_audio_description", 0xF29E),
    ("fa_automobile", 0xF1B9),
    ("fa_autoprefixer", 0xED47),
    ("fa_avianex", 0xEFC2),
    ("fa_aviato", 0xED4C),
    ("fa_award", 0xEE22),
    ("fa_aws", 0xF0EF),
    ("fa_baby", 0xEF33),
    ("fa_baby_carriage", 0xEF34),
    ("fa_backward", 0xF04A),
    ("fa_backward_fast", 0xF049),
    ("fa_backward_step", 0xF048),
    ("fa_bacon", 0xEF77),
    ("fa_bag_shopping", 0xF290),
    ("fa_bahai", 0xEECB),
    ("fa_balance_scale", 0xF24E),
    ("fa_ban", 0xF05E),
    ("fa_ban_smoking", 0xEE16),
    ("fa_bandage", 0xED74),
    ("fa_bandcamp", 0xF2D5),
    ("fa_bank", 0xF19C),
    ("fa_bar_chart", 0xF080),
    ("fa_bar_chart_o", 0xF080),
    ("fa_barcode", 0xF02A),
    ("fa_bars", 0xF0C9),
    ("fa_bars_progress", 0xEF8F),
    ("fa_bars_staggered", 0xEE19),
    ("fa_baseball", 0xED5C),
    ("fa_baseball_bat_ball", 0xED5B),
    ("fa_basket_shopping", 0xF291),
    ("fa_basketball", 0xED5D),
    ("fa_bath", 0xF2CD),
    ("fa_bathtub", 0xF2CD),
    ("fa_battery", 0xF240),
    ("fa_battery_0", 0xF244),
    ("fa_battery_1", 0xF243),
    ("fa_battery_2", 0xF242),
    ("fa_battery_3", 0xF241),
    ("fa_battery_4", 0xF240),
    ("fa_battery_empty", 0xF244),
    ("fa_battery_full", 0xF240),
    ("fa_battery_half", 0xF242),
    ("fa_battery_quarter", 0xF243),
    ("fa_battery_three_quarters", 0xF241),
    ("fa_battle_net", 0xEF94),
    ("fa_bed", 0xF236),
    ("fa_bed_pulse", 0xED8A),
    ("fa_beer", 0xF0FC),
    ("fa_beer_mug_empty", 0xF0FC),
    ("fa_behance", 0xF1B4),
    ("fa_behance_square", 0xF1B5),
    ("fa_bell", 0xF0F3),
    ("fa_bell_concierge", 0xEE2B),
    ("fa_bell_o", 0xF0A2),
    ("fa_bell_slash", 0xF1F6),
    ("fa_bell_slash_o", 0xF1F7),
    ("fa_bezier_curve", 0xEE24),
    ("fa_bicycle", 0xF206),
    ("fa_bimobject", 0xF0FF),
    ("fa_binoculars", 0xF1E5),
    ("fa_biohazard", 0xEF35),
    ("fa_birthday_cake", 0xF1FD),
    ("fa_bitbucket", 0xF171),
    ("fa_bitbucket_square", 0xF172),
    ("fa_bitcoin", 0xF10F),
    ("fa_bity", 0xF116),
    ("fa_black_tie", 0xF27E),
    ("fa_blackberry", 0xF117),
    ("fa_blender", 0xEDE1),
    ("fa_blender_phone", 0xEEEA),
    ("fa_blind", 0xF29D),
    ("fa_blog", 0xEF36),
    ("fa_blogger", 0xF11F),
    ("fa_blogger_b", 0xF12F),
    ("fa_bluetooth", 0xF293),
    ("fa_bluetooth_b", 0xF294),
    ("fa_bold", 0xF032),
    ("fa_bolt", 0xF0E7),
    ("fa_bomb", 0xF1E2),
    ("fa_bone", 0xEE9A),
    ("fa_bong", 0xEE25),
    ("fa_book", 0xF02D),
    ("fa_book_atlas", 0xEE21),
    ("fa_book_bible", 0xEEBE),
    ("fa_book_journal_whills", 0xEECD),
    ("fa_book_medical", 0xEF78),
    ("fa_book_open", 0xEDE2),
    ("fa_book_open_reader", 0xEE9B),
    ("fa_book_quran", 0xEEDC),
    ("fa_book_skull", 0xEEEB),
    ("fa_book_tanakh", 0xEF8E),
    ("fa_bookmark", 0xF02E),
    ("fa_bookmark_o", 0xF097),
    ("fa_bootstrap", 0xEF95),
    ("fa_border_all", 0xEFA3),
    ("fa_border_none", 0xEFA4),
    ("fa_border_top_left", 0xEFA5),
    ("fa_bowling_ball", 0xED5E),
    ("fa_box", 0xED75),
    ("fa_box_archive", 0xF187),
    ("fa_box_open", 0xED95),
    ("fa_boxes_stacked", 0xED76),
    ("fa_braille", 0xF2A1),
    ("fa_brain", 0xEE9C),
    ("fa_bread_slice", 0xEF79),
    ("fa_briefcase", 0xF0B1),
    ("fa_briefcase_medical", 0xED77),
    ("fa_broom", 0xEDE4),
    ("fa_broom_ball", 0xED6E),
    ("fa_brush", 0xEE26),
    ("fa_btc", 0xF15A),
    ("fa_buffer", 0xEF96),
    ("fa_bug", 0xF188),
    ("fa_building", 0xF1AD),
    ("fa_building_columns", 0xF19C),
    ("fa_building_o", 0xF0F7),
    ("fa_bullhorn", 0xF0A1),
    ("fa_bullseye", 0xF140),
    ("fa_burger", 0xEF82),
    ("fa_buromobelexperte", 0xF13F),
    ("fa_bus", 0xF207),
    ("fa_bus_simple", 0xEE27),
    ("fa_business_time", 0xEEBF),
    ("fa_buy_n_large", 0xEFB6),
    ("fa_buysellads", 0xF20D),
    ("fa_cab", 0xF1BA),
    ("fa_cable_car", 0xEF71),
    ("fa_cake_candles", 0xF1FD),
    ("fa_calculator", 0xF1EC),
    ("fa_calendar", 0xF073),
    ("fa_calendar_check", 0xF274),
    ("fa_calendar_check_o", 0xF274),
    ("fa_calendar_day", 0xEF37),
    ("fa_calendar_days", 0xF073),
    ("fa_calendar_minus", 0xF272),
    ("fa_calendar_minus_o", 0xF272),
    ("fa_calendar_o", 0xF133),
    ("fa_calendar_plus", 0xF271),
    ("fa_calendar_plus_o", 0xF271),
    ("fa_calendar_times_o", 0xF273),
    ("fa_calendar_week", 0xEF38),
    ("fa_calendar_xmark", 0xF273),
    ("fa_camera", 0xF030),
    ("fa_camera_retro", 0xF083),
    ("fa_campground", 0xEEEC),
    ("fa_canadian_maple_leaf", 0xEF39),
    ("fa_candy_cane", 0xEF3A),
    ("fa_cannabis", 0xEE28),
    ("fa_capsules", 0xED79),
    ("fa_car", 0xF1B9),
    ("fa_car_battery", 0xEE9E),
    ("fa_car_burst", 0xEE9F),
    ("fa_car_rear", 0xEE9D),
    ("fa_car_side", 0xEEA0),
    ("fa_caravan", 0xEFC1),
    ("fa_caret_down", 0xF0D7),
    ("fa_caret_left", 0xF0D9),
    ("fa_caret_right", 0xF0DA),
    ("fa_caret_square_o_down", 0xF150),
    ("fa_caret_square_o_left", 0xF191),
    ("fa_caret_square_o_right", 0xF152),
    ("fa_caret_square_o_up", 0xF151),
    ("fa_caret_up", 0xF0D8),
    ("fa_carrot", 0xEF3B),
    ("fa_cart_arrow_down", 0xF218),
    ("fa_cart_flatbed", 0xED7F),
    ("fa_cart_flatbed_suitcase", 0xEE66),
    ("fa_cart_plus", 0xF217),
    ("fa_cart_shopping", 0xF07A),
    ("fa_cash_register", 0xEF3C),
    ("fa_cat", 0xEEED),
    ("fa_cc", 0xF20A),
    ("fa_cc_amazon_pay", 0xED57),
    ("fa_cc_amex", 0xF1F3),
    ("fa_cc_apple_pay", 0xED42),
    ("fa_cc_diners_club", 0xF24C),
    ("fa_cc_discover", 0xF1F2),
    ("fa_cc_jcb", 0xF24B),
    ("fa_cc_mastercard", 0xF1F1),
    ("fa_cc_paypal", 0xF1F4),
    ("fa_cc_stripe", 0xF1F5),
    ("fa_cc_visa", 0xF1F0),
    ("fa_centercode", 0xF14F),
    ("fa_centos", 0xEF3D),
    ("fa_certificate", 0xF0A3),
    ("fa_chain", 0xF0C1),
    ("fa_chain_broken", 0xF127),
    ("fa_chair", 0xEEEE),
    ("fa_chalkboard", 0xEDE5),
    ("fa_chalkboard_user", 0xEDE6),
    ("fa_champagne_glasses", 0xEF49),
    ("fa_charging_station", 0xEEA1),
    ("fa_chart_area", 0xF1FE),
    ("fa_chart_bar", 0xF080),
    ("fa_chart_line", 0xF201),
    ("fa_chart_pie", 0xF200),
    ("fa_check", 0xF00C),
    ("fa_check_circle", 0xF058),
    ("fa_check_circle_o", 0xF05D),
    ("fa_check_double", 0xEE29),
    ("fa_check_square", 0xF14A),
    ("fa_check_square_o", 0xF046),
    ("fa_check_to_slot", 0xEF2F),
    ("fa_cheese", 0xEF7A),
    ("fa_chess", 0xED5F),
    ("fa_chess_bishop", 0xED60),
    ("fa_chess_board", 0xED61),
    ("fa_chess_king", 0xED62),
    ("fa_chess_knight", 0xED63),
    ("fa_chess_pawn", 0xED64),
    ("fa_chess_queen", 0xED65),
    ("fa_chess_rook", 0xED66),
    ("fa_chevron_circle_down", 0xF13A),
    ("fa_chevron_circle_left", 0xF137),
    ("fa_chevron_circle_right", 0xF138),
    ("fa_chevron_circle_up", 0xF139),
    ("fa_chevron_down", 0xF078),
    ("fa_chevron_left", 0xF053),
    ("fa_chevron_right", 0xF054),
    ("fa_chevron_up", 0xF077),
    ("fa_child", 0xF1AE),
    ("fa_chrome", 0xF268),
    ("fa_chromecast", 0xEF97),
    ("fa_church", 0xEDE7),
    ("fa_circle", 0xF111),
    ("fa_circle_arrow_down", 0xF0AB),
    ("fa_circle_arrow_left", 0xF0A8),
    ("fa_circle_arrow_right", 0xF0A9),
    ("fa_circle_arrow_up", 0xF0AA),
    ("fa_circle_check", 0xF05D),
    ("fa_circle_chevron_down", 0xF13A),
    ("fa_circle_chevron_left", 0xF137),
    ("fa_circle_chevron_right", 0xF138),
    ("fa_circle_chevron_up", 0xF139),
    ("fa_circle_dollar_to_slot", 0xED98),
    ("fa_circle_dot", 0xF192),
    ("fa_circle_down", 0xF01A),
    ("fa_circle_exclamation", 0xF06A),
    ("fa_circle_h", 0xED83),
    ("fa_circle_half_stroke", 0xF042),
    ("fa_circle_info", 0xF05A),
    ("fa_circle_left", 0xF190),
    ("fa_circle_minus", 0xF056),
    ("fa_circle_notch", 0xF1CE),
    ("fa_circle_o", 0xF10C),
    ("fa_circle_o_notch", 0xF1CE),
    ("fa_circle_pause", 0xF28B),
    ("fa_circle_play", 0xF144),
    ("fa_circle_plus", 0xF055),
    ("fa_circle_question", 0xF059),
    ("fa_circle_radiation", 0xEF5B),
    ("fa_circle_right", 0xF18E),
    ("fa_circle_stop", 0xF28D),
    ("fa_circle_thin", 0xF1DB),
    ("fa_circle_up", 0xF01B),
    ("fa_circle_user", 0xF2BD),
    ("fa_circle_xmark", 0xF05C),
    ("fa_city", 0xEEC0),
    ("fa_clipboard", 0xF0EA),
    ("fa_clipboard_alt", 0xF07F),
    ("fa_clipboard_check", 0xED7A),
    ("fa_clipboard_list", 0xED7B),
    ("fa_clipboard_user", 0xEF7C),
    ("fa_clock", 0xF017),
    ("fa_clock_o", 0xF017),
    ("fa_clock_rotate_left", 0xF1DA),
    ("fa_clone", 0xF24D),
    ("fa_close", 0xF00D),
    ("fa_closed_captioning", 0xF20A),
    ("fa_cloud", 0xF0C2),
    ("fa_cloud_arrow_down", 0xF0ED),
    ("fa_cloud_arrow_up", 0xF0EE),
    ("fa_cloud_bolt", 0xEF2C),
    ("fa_cloud_download", 0xF0ED),
    ("fa_cloud_meatball", 0xEF1A),
    ("fa_cloud_moon", 0xEEEF),
    ("fa_cloud_moon_rain", 0xEF1B),
    ("fa_cloud_rain", 0xEF1C),
    ("fa_cloud_showers_heavy", 0xEF1D),
    ("fa_cloud_sun", 0xEEF0),
    ("fa_cloud_sun_rain", 0xEF1E),
    ("fa_cloud_upload", 0xF0EE),
    ("fa_cloudscale", 0xF15F),
    ("fa_cloudsmith", 0xF167),
    ("fa_cloudversify", 0xF16F),
    ("fa_cny", 0xF157),
    ("fa_code", 0xF121),
    ("fa_code_branch", 0xF126),
    ("fa_code_commit", 0xF172),
    ("fa_code_fork", 0xF126),
    ("fa_code_merge", 0xF17F),
    ("fa_codepen", 0xF1CB),
    ("fa_codiepie", 0xF284),
    ("fa_coffee", 0xF0F4),
    ("fa_cog", 0xF013),
    ("fa_cogs", 0xF085),
    ("fa_coins", 0xEDE8),
    ("fa_columns", 0xF0DB),
    ("fa_comment", 0xF075),
    ("fa_comment_dollar", 0xEEC1),
    ("fa_comment_dots", 0xF27B),
    ("fa_comment_medical", 0xEF7D),
    ("fa_comment_o", 0xF0E5),
    ("fa_comment_slash", 0xED96),
    ("fa_comment_sms", 0xEF68),
    ("fa_commenting", 0xF27A),
    ("fa_commenting_o", 0xF27B),
    ("fa_comments", 0xF086),
    ("fa_comments_dollar", 0xEEC2),
    ("fa_comments_o", 0xF0E6),
    ("fa_compact_disc", 0xEDE9),
    ("fa_compass", 0xF14E),
    ("fa_compass_drafting", 0xEE31),
    ("fa_compress", 0xF066),
    ("fa_computer_mouse", 0xEFBA),
    ("fa_confluence", 0xEF3F),
    ("fa_connectdevelop", 0xF20E),
    ("fa_contao", 0xF26D),
    ("fa_cookie", 0xEE2C),
    ("fa_cookie_bite", 0xEE2D),
    ("fa_copy", 0xF0C5),
    ("fa_copyright", 0xF1F9),
    ("fa_cotton_bureau", 0xEFB5),
    ("fa_couch", 0xED97),
    ("fa_cow", 0xEEF1),
    ("fa_cpanel", 0xF18F),
    ("fa_creative_commons", 0xF25E),
    ("fa_creative_commons_by", 0xEDB1),
    ("fa_creative_commons_nc", 0xEDB2),
    ("fa_creative_commons_nc_eu", 0xEDB3),
    ("fa_creative_commons_nc_jp", 0xEDB4),
    ("fa_creative_commons_nd", 0xEDB5),
    ("fa_creative_commons_pd", 0xEDB6),
    ("fa_creative_commons_pd_alt", 0xEDB7),
    ("fa_creative_commons_remix", 0xEDB8),
    ("fa_creative_commons_sa", 0xEDB9),
    ("fa_creative_commons_sampling", 0xEDBA),
    ("fa_creative_commons_sampling_plus", 0xEDBB),
    ("fa_creative_commons_share", 0xEDBC),
    ("fa_creative_commons_zero", 0xEDBD),
    ("fa_credit_card", 0xF09D),
    ("fa_credit_card_alt", 0xF283),
    ("fa_critical_role", 0xEEF2),
    ("fa_crop", 0xF125),
    ("fa_crop_simple", 0xEE2E),
    ("fa_cross", 0xEEC3),
    ("fa_crosshairs", 0xF05B),
    ("fa_crow", 0xEDEA),
    ("fa_crown", 0xEDEB),
    ("fa_crutch", 0xEF7E),
    ("fa_css3", 0xF13C),
    ("fa_css3_alt", 0xF19F),
    ("fa_cube", 0xF1B2),
    ("fa_cubes", 0xF1B3),
    ("fa_cut", 0xF0C4),
    ("fa_cutlery", 0xF0F5),
    ("fa_cuttlefish", 0xF1AF),
    ("fa_d_and_d", 0xF1BF),
    ("fa_d_and_d_beyond", 0xEEF3),
    ("fa_dashboard", 0xF0E4),
    ("fa_dashcube", 0xF210),
    ("fa_database", 0xF1C0),
    ("fa_deaf", 0xF2A4),
    ("fa_deafness", 0xF2A4),
    ("fa_dedent", 0xF03B),
    ("fa_delete_left", 0xEE23),
    ("fa_delicious", 0xF1A5),
    ("fa_democrat", 0xEF1F),
    ("fa_deploydog", 0xF1CF),
    ("fa_deskpro", 0xF1DF),
    ("fa_desktop", 0xF108),
    ("fa_dev", 0xEEF4),
    ("fa_deviantart", 0xF1BD),
    ("fa_dharmachakra", 0xEEC4),
    ("fa_dhl", 0xEF40),
    ("fa_diagram_project", 0xEFCE),
    ("fa_diamond", 0xF29F),
    ("fa_diamond_turn_right", 0xEEA2),
    ("fa_diaspora", 0xEF41),
    ("fa_dice", 0xEDEC),
    ("fa_dice_d20", 0xEEF5),
    ("fa_dice_d6", 0xEEF6),
    ("fa_dice_five", 0xEDED),
    ("fa_dice_four", 0xEDEE),
    ("fa_dice_one", 0xEDEF),
    ("fa_dice_six", 0xEDF0),
    ("fa_dice_three", 0xEDF1),
    ("fa_dice_two", 0xEDF2),
    ("fa_digg", 0xF1A6),
    ("fa_digital_ocean", 0xF1EF),
    ("fa_discord", 0xF1FF),
    ("fa_discourse", 0xF20C),
    ("fa_disease", 0xEF7F),
    ("fa_divide", 0xEDF3),
    ("fa_dna", 0xED7D),
    ("fa_dochub", 0xF20F),
    ("fa_docker", 0xF21F),
    ("fa_dog", 0xEEF7),
    ("fa_dollar", 0xF155),
    ("fa_dollar_sign", 0xF155),
    ("fa_dolly", 0xED7E),
    ("fa_door_closed", 0xEDF4),
    ("fa_door_open", 0xEDF5),
    ("fa_dot_circle_o", 0xF192),
    ("fa_dove", 0xED99),
    ("fa_down_left_and_up_right_to_center", 0xED4D),
    ("fa_down_long", 0xF03F),
    ("fa_download", 0xF019),
    ("fa_draft2digital", 0xF220),
    ("fa_dragon", 0xEEF8),
    ("fa_draw_polygon", 0xEEA3),
    ("fa_dribbble", 0xF17D),
    ("fa_drivers_license", 0xF2C2),
    ("fa_drivers_license_o", 0xF2C3),
    ("fa_dropbox", 0xF16B),
    ("fa_droplet", 0xF043),
    ("fa_droplet_slash", 0xEE8E),
    ("fa_drum", 0xEE32),
    ("fa_drum_steelpan", 0xEE33),
    ("fa_drumstick_bite", 0xEEF9),
    ("fa_drupal", 0xF1A9),
    ("fa_dumbbell", 0xED67),
    ("fa_dumpster", 0xEF42),
    ("fa_dumpster_fire", 0xEF43),
    ("fa_dungeon", 0xEEFA),
    ("fa_dyalog", 0xF22F),
    ("fa_ear_deaf", 0xF2A4),
    ("fa_ear_listen", 0xF2A2),
    ("fa_earlybirds", 0xF230),
    ("fa_earth_africa", 0xEE45),
    ("fa_earth_americas", 0xEE46),
    ("fa_earth_asia", 0xEE47),
    ("fa_earth_europe", 0xEF4B),
    ("fa_ebay", 0xEDBE),
    ("fa_edge", 0xF282),
    ("fa_edit", 0xF044),
    ("fa_eercast", 0xF2DA),
    ("fa_egg", 0xEF80),
    ("fa_eject", 0xF052),
    ("fa_elementor", 0xED5A),
    ("fa_ellipsis", 0xF141),
    ("fa_ellipsis_h", 0xF141),
    ("fa_ellipsis_v", 0xF142),
    ("fa_ellipsis_vertical", 0xF142),
    ("fa_ello", 0xEEA4),
    ("fa_ember", 0xED4E),
    ("fa_empire", 0xF1D1),
    ("fa_envelope", 0xF0E0),
    ("fa_envelope_o", 0xF003),
    ("fa_envelope_open", 0xF2B6),
    ("fa_envelope_open_o", 0xF2B7),
    ("fa_envelope_open_text", 0xEEC5),
    ("fa_envelope_square", 0xF199),
    ("fa_envelopes_bulk", 0xEED1),
    ("fa_envira", 0xF299),
    ("fa_equals", 0xEDF6),
    ("fa_eraser", 0xF12D),
    ("fa_erlang", 0xF23F),
    ("fa_ethereum", 0xED58),
    ("fa_ethernet", 0xEF44),
    ("fa_etsy", 0xF2D7),
    ("fa_eur", 0xF153),
    ("fa_euro", 0xF153),
    ("fa_euro_sign", 0xF153),
    ("fa_evernote", 0xEF98),
    ("fa_exchange", 0xF0EC),
    ("fa_exclamation", 0xF12A),
    ("fa_exclamation_circle", 0xF06A),
    ("fa_exclamation_triangle", 0xF071),
    ("fa_expand", 0xF065),
    ("fa_expeditedssl", 0xF23E),
    ("fa_external_link", 0xF08E),
    ("fa_external_link_square", 0xF14C),
    ("fa_eye", 0xF06E),
    ("fa_eye_dropper", 0xF1FB),
    ("fa_eye_low_vision", 0xF2A8),
    ("fa_eye_slash", 0xF070),
    ("fa_eyedropper", 0xF1FB),
    ("fa_fa", 0xF2B4),
    ("fa_face_angry", 0xEE1F),
    ("fa_face_dizzy", 0xEE30),
    ("fa_face_flushed", 0xEE42),
    ("fa_face_frown", 0xF119),
    ("fa_face_frown_open", 0xEE43),
    ("fa_face_grimace", 0xEE48),
    ("fa_face_grin", 0xEE49),
    ("fa_face_grin_beam", 0xEE4B),
    ("fa_face_grin_beam_sweat", 0xEE4C),
    ("fa_face_grin_hearts", 0xEE4D),
    ("fa_face_grin_squint", 0xEE4E),
    ("fa_face_grin_squint_tears", 0xEE4F),
    ("fa_face_grin_stars", 0xEE50),
    ("fa_face_grin_tears", 0xEE51),
    ("fa_face_grin_tongue", 0xEE52),
    ("fa_face_grin_tongue_squint", 0xEE53),
    ("fa_face_grin_tongue_wink", 0xEE54),
    ("fa_face_grin_wide", 0xEE4A),
    ("fa_face_grin_wink", 0xEE55),
    ("fa_face_kiss", 0xEE5F),
    ("fa_face_kiss_beam", 0xEE60),
    ("fa_face_kiss_wink_heart", 0xEE61),
    ("fa_face_laugh", 0xEE62),
    ("fa_face_laugh_beam", 0xEE63),
    ("fa_face_laugh_squint", 0xEE64),
    ("fa_face_laugh_wink", 0xEE65),
    ("fa_face_meh", 0xF11A),
    ("fa_face_meh_blank", 0xEE6D),
    ("fa_face_rolling_eyes", 0xEE6E),
    ("fa_face_sad_cry", 0xEE7B),
    ("fa_face_sad_tear", 0xEE7C),
    ("fa_face_smile", 0xF118),
    ("fa_face_smile_beam", 0xEE80),
    ("fa_face_smile_wink", 0xEDA9),
    ("fa_face_surprise", 0xEE89),
    ("fa_face_tired", 0xEE8F),
    ("fa_facebook", 0xF09A),
    ("fa_facebook_f", 0xF24F),
    ("fa_facebook_messenger", 0xF25F),
    ("fa_facebook_official", 0xF230),
    ("fa_facebook_square", 0xF082),
    ("fa_fan", 0xEFA7),
    ("fa_fantasy_flight_games", 0xEEFB),
    ("fa_fast_backward", 0xF049),
    ("fa_fast_forward", 0xF050),
    ("fa_fax", 0xF1AC),
    ("fa_feather", 0xEDF7),
    ("fa_feather_pointed", 0xEE34),
    ("fa_fedex", 0xEF45),
    ("fa_fedora", 0xEF46),
    ("fa_feed", 0xF09E),
    ("fa_female", 0xF182),
    ("fa_fighter_jet", 0xF0FB),
    ("fa_figma", 0xEF47),
    ("fa_file", 0xF15B),
    ("fa_file_archive_o", 0xF1C6),
    ("fa_file_arrow_down", 0xEE36),
    ("fa_file_arrow_up", 0xEE3D),
    ("fa_file_audio", 0xF1C7),
    ("fa_file_audio_o", 0xF1C7),
    ("fa_file_code", 0xF1C9),
    ("fa_file_code_o", 0xF1C9),
    ("fa_file_contract", 0xEE35),
    ("fa_file_csv", 0xEEFC),
    ("fa_file_excel", 0xF1C3),
    ("fa_file_excel_o", 0xF1C3),
    ("fa_file_export", 0xEE37),
    ("fa_file_image", 0xF1C5),
    ("fa_file_image_o", 0xF1C5),
    ("fa_file_import", 0xEE38),
    ("fa_file_invoice", 0xEE39),
    ("fa_file_invoice_dollar", 0xEE3A),
    ("fa_file_lines", 0xF15C),
    ("fa_file_medical", 0xED80),
    ("fa_file_movie_o", 0xF1C8),
    ("fa_file_o", 0xF016),
    ("fa_file_pdf", 0xF1C1),
    ("fa_file_pdf_o", 0xF1C1),
    ("fa_file_pen", 0xF05F),
    ("fa_file_photo_o", 0xF1C5),
    ("fa_file_picture_o", 0xF1C5),
    ("fa_file_powerpoint", 0xF1C4),
    ("fa_file_powerpoint_o", 0xF1C4),
    ("fa_file_prescription", 0xEE3B),
    ("fa_file_signature", 0xEE3C),
    ("fa_file_sound_o", 0xF1C7),
    ("fa_file_text", 0xF15C),
    ("fa_file_text_o", 0xF0F6),
    ("fa_file_video", 0xF1C8),
    ("fa_file_video_o", 0xF1C8),
    ("fa_file_waveform", 0xED81),
    ("fa_file_word", 0xF1C2),
    ("fa_file_word_o", 0xF1C2),
    ("fa_file_zip_o", 0xF1C6),
    ("fa_file_zipper", 0xF1C6),
    ("fa_files_o", 0xF0C5),
    ("fa_fill", 0xEE3E),
    ("fa_fill_drip", 0xEE3F),
    ("fa_film", 0xF008),
    ("fa_filter", 0xF0B0),
    ("fa_filter_circle_dollar", 0xEEC8),
    ("fa_fingerprint", 0xEE40),
    ("fa_fire", 0xF06D),
    ("fa_fire_extinguisher", 0xF134),
    ("fa_fire_flame_curved", 0xEF76),
    ("fa_fire_flame_simple", 0xED78),
    ("fa_firefox", 0xF269),
    ("fa_first_order", 0xF2B0),
    ("fa_first_order_alt", 0xEDD4),
    ("fa_firstdraft", 0xF262),
    ("fa_fish", 0xEE41),
    ("fa_flag", 0xF024),
    ("fa_flag_checkered", 0xF11E),
    ("fa_flag_o", 0xF11D),
    ("fa_flag_usa", 0xEF20),
    ("fa_flash", 0xF0E7),
    ("fa_flask", 0xF0C3),
    ("fa_flickr", 0xF16E),
    ("fa_flipboard", 0xED68),
    ("fa_floppy_disk", 0xF0C7),
    ("fa_floppy_o", 0xF0C7),
    ("fa_fly", 0xED43),
    ("fa_folder", 0xF07B),
    ("fa_folder_minus", 0xEEC6),
    ("fa_folder_o", 0xF114),
    ("fa_folder_open", 0xF07C),
    ("fa_folder_open_o", 0xF115),
    ("fa_folder_plus", 0xEEC7),
    ("fa_folder_tree", 0xEF81),
    ("fa_font", 0xF031),
    ("fa_font_awesome", 0xF2B4),
    ("fa_fonticons", 0xF280),
    ("fa_fonticons_fi", 0xF26F),
    ("fa_football", 0xED69),
    ("fa_fort_awesome", 0xF286),
    ("fa_fort_awesome_alt", 0xF27F),
    ("fa_forumbee", 0xF211),
    ("fa_forward", 0xF04E),
    ("fa_forward_fast", 0xF050),
    ("fa_forward_step", 0xF051),
    ("fa_foursquare", 0xF180),
    ("fa_free_code_camp", 0xF2C5),
    ("fa_freebsd", 0xF28F),
    ("fa_frog", 0xEDF8),
    ("fa_frown_o", 0xF119),
    ("fa_fulcrum", 0xEDD5),
    ("fa_futbol", 0xF1E3),
    ("fa_futbol_o", 0xF1E3),
    ("fa_galactic_republic", 0xEDD6),
    ("fa_galactic_senate", 0xEDD7),
    ("fa_gamepad", 0xF11B),
    ("fa_gas_pump", 0xEDF9),
    ("fa_gauge", 0xEEB2),
    ("fa_gauge_high", 0xED2F),
    ("fa_gauge_simple", 0xEEB3),
    ("fa_gauge_simple_high", 0xF0E4),
    ("fa_gavel", 0xF0E3),
    ("fa_gbp", 0xF154),
    ("fa_ge", 0xF1D1),
    ("fa_gear", 0xF013),
    ("fa_gears", 0xF085),
    ("fa_gem", 0xF219),
    ("fa_genderless", 0xF22D),
    ("fa_get_pocket", 0xF265),
    ("fa_gg", 0xF260),
    ("fa_gg_circle", 0xF261),
    ("fa_ghost", 0xEEFE),
    ("fa_gift", 0xF06B),
    ("fa_gifts", 0xEF48),
    ("fa_git", 0xF1D3),
    ("fa_git_alt", 0xEFA0),
    ("fa_git_square", 0xF1D2),
    ("fa_github", 0xF09B),
    ("fa_github_alt", 0xF113),
    ("fa_github_square", 0xF092),
    ("fa_gitkraken", 0xF2AC),
    ("fa_gitlab", 0xF296),
    ("fa_gitter", 0xED50),
    ("fa_gittip", 0xF184),
    ("fa_glass", 0xF000),
    ("fa_glasses", 0xEDFA),
    ("fa_glide", 0xF2A5),
    ("fa_glide_g", 0xF2A6),
    ("fa_globe", 0xF0AC),
    ("fa_gofore", 0xF2AF),
    ("fa_golf_ball_tee", 0xED6A),
    ("fa_goodreads", 0xF2BF),
    ("fa_goodreads_g", 0xF2CF),
    ("fa_google", 0xF1A0),
    ("fa_google_drive", 0xF2DF),
    ("fa_google_play", 0xF2E1),
    ("fa_google_plus", 0xF0D5),
    ("fa_google_plus_circle", 0xF2B3),
    ("fa_google_plus_official", 0xF2B3),
    ("fa_google_plus_square", 0xF0D4),
    ("fa_google_wallet", 0xF1EE),
    ("fa_gopuram", 0xEEC9),
    ("fa_graduation_cap", 0xF19D),
    ("fa_gratipay", 0xF184),
    ("fa_grav", 0xF2D6),
    ("fa_greater_than", 0xEDFB),
    ("fa_greater_than_equal", 0xEDFC),
    ("fa_grip", 0xEE56),
    ("fa_grip_lines", 0xEF4C),
    ("fa_grip_lines_vertical", 0xEF4D),
    ("fa_grip_vertical", 0xEE57),
    ("fa_gripfire", 0xF2E2),
    ("fa_group", 0xF0C0),
    ("fa_grunt", 0xF2E3),
    ("fa_guitar", 0xEF4E),
    ("fa_gulp", 0xF2E4),
    ("fa_h_square", 0xF0FD),
    ("fa_hacker_news", 0xF1D4),
    ("fa_hackerrank", 0xEEA5),
    ("fa_hammer", 0xEEFF),
    ("fa_hamsa", 0xEECA),
    ("fa_hand", 0xF256),
    ("fa_hand_back_fist", 0xF255),
    ("fa_hand_dots", 0xED73),
    ("fa_hand_fist", 0xEEFD),
    ("fa_hand_grab_o", 0xF255),
    ("fa_hand_holding", 0xED9A),
    ("fa_hand_holding_dollar", 0xED9C),
    ("fa_hand_holding_droplet", 0xED9D),
    ("fa_hand_holding_heart", 0xED9B),
    ("fa_hand_lizard", 0xF258),
    ("fa_hand_lizard_o", 0xF258),
    ("fa_hand_middle_finger", 0xEF83),
    ("fa_hand_o_down", 0xF0A7),
    ("fa_hand_o_left", 0xF0A5),
    ("fa_hand_o_right", 0xF0A4),
    ("fa_hand_o_up", 0xF0A6),
    ("fa_hand_paper_o", 0xF256),
    ("fa_hand_peace", 0xF25B),
    ("fa_hand_peace_o", 0xF25B),
    ("fa_hand_point_down", 0xF0A7),
    ("fa_hand_point_left", 0xF0A5),
    ("fa_hand_point_right", 0xF0A4),
    ("fa_hand_point_up", 0xF0A6),
    ("fa_hand_pointer", 0xF25A),
    ("fa_hand_pointer_o", 0xF25A),
    ("fa_hand_rock_o", 0xF255),
    ("fa_hand_scissors", 0xF257),
    ("fa_hand_scissors_o", 0xF257),
    ("fa_hand_spock", 0xF259),
    ("fa_hand_spock_o", 0xF259),
    ("fa_hand_stop_o", 0xF256),
    ("fa_hands", 0xF2A7),
    ("fa_hands_asl_interpreting", 0xF2A3),
    ("fa_hands_holding", 0xED9E),
    ("fa_hands_praying", 0xEEDB),
    ("fa_handshake", 0xF2B5),
    ("fa_handshake_angle", 0xED9F),
    ("fa_handshake_o", 0xF2B5),
    ("fa_handshake_simple", 0xEDA0),
    ("fa_hanukiah", 0xEF00),
    ("fa_hard_drive", 0xF0A0),
    ("fa_hard_of_hearing", 0xF2A4),
    ("fa_hashtag", 0xF292),
    ("fa_hat_cowboy", 0xEFB7),
    ("fa_hat_cowboy_side", 0xEFB8),
    ("fa_hat_wizard", 0xEF01),
    ("fa_hdd_o", 0xF0A0),
    ("fa_header", 0xF1DC),
    ("fa_heading", 0xF1DC),
    ("fa_headphones", 0xF025),
    ("fa_headphones_simple", 0xEE58),
    ("fa_headset", 0xEE59),
    ("fa_heard_o", 0xF08A),
    ("fa_heart", 0xF004),
    ("fa_heart_crack", 0xEF4F),
    ("fa_heart_o", 0xF08A),
    ("fa_heart_pulse", 0xF21E),
    ("fa_heartbeat", 0xF21E),
    ("fa_helicopter", 0xEDFD),
    ("fa_helmet_safety", 0xEF84),
    ("fa_highlighter", 0xEE5A),
    ("fa_hippo", 0xEF03),
    ("fa_hips", 0xED6B),
    ("fa_hire_a_helper", 0xF2E6),
    ("fa_history", 0xF1DA),
    ("fa_hockey_puck", 0xED6C),
    ("fa_holly_berry", 0xEF50),
    ("fa_home", 0xF015),
    ("fa_hooli", 0xED51),
    ("fa_hornbill", 0xEE5B),
    ("fa_horse", 0xEF04),
    ("fa_horse_head", 0xEF51),
    ("fa_hospital", 0xF0F8),
    ("fa_hospital_o", 0xF0F8),
    ("fa_hospital_user", 0xEF86),
    ("fa_hot_tub_person", 0xEE5C),
    ("fa_hotdog", 0xEF87),
    ("fa_hotel", 0xF236),
    ("fa_hotel_building", 0xEE5D),
    ("fa_hotjar", 0xF2E7),
    ("fa_hourglass", 0xF254),
    ("fa_hourglass_1", 0xF251),
    ("fa_hourglass_2", 0xF252),
    ("fa_hourglass_3", 0xF253),
    ("fa_hourglass_end", 0xF253),
    ("fa_hourglass_half", 0xF252),
    ("fa_hourglass_o", 0xF250),
    ("fa_hourglass_start", 0xF251),
    ("fa_house", 0xF015),
    ("fa_house_chimney", 0xEF85),
    ("fa_house_chimney_crack", 0xEF05),
    ("fa_house_chimney_medical", 0xEF7B),
    ("fa_houzz", 0xF27C),
    ("fa_hryvnia_sign", 0xEF06),
    ("fa_html5", 0xF13B),
    ("fa_hubspot", 0xF2E8),
    ("fa_hurricane", 0xEF21),
    ("fa_i_cursor", 0xF246),
    ("fa_ice_cream", 0xEF88),
    ("fa_icicles", 0xEF52),
    ("fa_icons", 0xEFA8),
    ("fa_id_badge", 0xF2C1),
    ("fa_id_card", 0xF2C2),
    ("fa_id_card_clip", 0xED84),
    ("fa_id_card_o", 0xF2C3),
    ("fa_igloo", 0xEF53),
    ("fa_ils", 0xF20B),
    ("fa_image", 0xF03E),
    ("fa_image_portrait", 0xED19),
    ("fa_images", 0xF00F),
    ("fa_imdb", 0xF2D8),
    ("fa_inbox", 0xF01C),
    ("fa_indent", 0xF03C),
    ("fa_industry", 0xF275),
    ("fa_infinity", 0xEDFE),
    ("fa_info", 0xF129),
    ("fa_info_circle", 0xF05A),
    ("fa_inr", 0xF156),
    ("fa_instagram", 0xF16D),
    ("fa_institution", 0xF19C),
    ("fa_intercom", 0xEF54),
    ("fa_internet_explorer", 0xF26B),
    ("fa_intersex", 0xF224),
    ("fa_invision", 0xEF55),
    ("fa_ioxhost", 0xF208),
    ("fa_italic", 0xF033),
    ("fa_itch_io", 0xEF99),
    ("fa_itunes", 0xF2E9),
    ("fa_itunes_note", 0xF2EB),
    ("fa_java", 0xEDAF),
    ("fa_jedi", 0xEECC),
    ("fa_jedi_order", 0xEDD8),
    ("fa_jenkins", 0xF2EC),
    ("fa_jet_fighter", 0xF0FB),
    ("fa_jira", 0xEF56),
    ("fa_joget", 0xF2ED),
    ("fa_joint", 0xEE5E),
    ("fa_joomla", 0xF1AA),
    ("fa_jpy", 0xF157),
    ("fa_js", 0xF2EE),
    ("fa_jsfiddle", 0xF1CC),
    ("fa_kaaba", 0xEECE),
    ("fa_kaggle", 0xEEA6),
    ("fa_key", 0xF084),
    ("fa_keybase", 0xEDBF),
    ("fa_keyboard", 0xF11C),
    ("fa_keyboard_o", 0xF11C),
    ("fa_keycdn", 0xF2F0),
    ("fa_khanda", 0xEECF),
    ("fa_kickstarter", 0xF2F3),
    ("fa_kickstarter_k", 0xF2F4),
    ("fa_kit_medical", 0xED82),
    ("fa_kiwi_bird", 0xEDFF),
    ("fa_korvue", 0xED59),
    ("fa_krw", 0xF159),
    ("fa_landmark", 0xEED0),
    ("fa_landmark_dome", 0xEF22),
    ("fa_language", 0xF1AB),
    ("fa_laptop", 0xF109),
    ("fa_laptop_code", 0xEEA7),
    ("fa_laptop_medical", 0xEF89),
    ("fa_laravel", 0xF2F7),
    ("fa_lastfm", 0xF202),
    ("fa_lastfm_square", 0xF203),
    ("fa_layer_group", 0xEEA8),
    ("fa_leaf", 0xF06C),
    ("fa_leanpub", 0xF212),
    ("fa_left_long", 0xF04F),
    ("fa_left_right", 0xF08F),
    ("fa_legal", 0xF0E3),
    ("fa_lemon", 0xF094),
    ("fa_lemon_o", 0xF094),
    ("fa_less", 0xED48),
    ("fa_less_than", 0xEFC3),
    ("fa_less_than_equal", 0xEFC4),
    ("fa_level_down", 0xF149),
    ("fa_level_up", 0xF148),
    ("fa_life_bouy", 0xF1CD),
    ("fa_life_buoy", 0xF1CD),
    ("fa_life_ring", 0xF1CD),
    ("fa_life_saver", 0xF1CD),
    ("fa_lightbulb", 0xF0EB),
    ("fa_lightbulb_o", 0xF0EB),
    ("fa_line", 0xF2FB),
    ("fa_line_chart", 0xF201),
    ("fa_link", 0xF0C1),
    ("fa_link_slash", 0xF127),
    ("fa_linkedin", 0xF0E1),
    ("fa_linkedin_in", 0xF0E1),
    ("fa_linkedin_square", 0xF08C),
    ("fa_linode", 0xF2B8),
    ("fa_linux", 0xF17C),
    ("fa_lira_sign", 0xF195),
    ("fa_list", 0xF03A),
    ("fa_list_alt", 0xF022),
    ("fa_list_check", 0xF0AE),
    ("fa_list_ol", 0xF0CB),
    ("fa_list_ul", 0xF0CA),
    ("fa_location_arrow", 0xF124),
    ("fa_location_crosshairs", 0xEEA9),
    ("fa_location_dot", 0xED00),
    ("fa_location_pin", 0xF041),
    ("fa_lock", 0xF023),
    ("fa_lock_open", 0xF2FC),
    ("fa_long_arrow_down", 0xF175),
    ("fa_long_arrow_left", 0xF177),
    ("fa_long_arrow_right", 0xF178),
    ("fa_long_arrow_up", 0xF176),
    ("fa_low_vision", 0xF2A8),
    ("fa_lungs", 0xEEAA),
    ("fa_lyft", 0xF2FD),
    ("fa_magento", 0xF2FF),
    ("fa_magic", 0xF0D0),
    ("fa_magnet", 0xF076),
    ("fa_magnifying_glass", 0xF002),
    ("fa_magnifying_glass_dollar", 0xEEDD),
    ("fa_magnifying_glass_location", 0xEEDE),
    ("fa_magnifying_glass_minus", 0xF010),
    ("fa_magnifying_glass_plus", 0xF00E),
    ("fa_mail_forward", 0xF064),
    ("fa_mail_reply", 0xF112),
    ("fa_mail_reply_all", 0xF122),
    ("fa_mailchimp", 0xEE67),
    ("fa_male", 0xF183),
    ("fa_mandalorian", 0xEDD9),
    ("fa_map", 0xF279),
    ("fa_map_location", 0xEE68),
    ("fa_map_location_dot", 0xEE69),
    ("fa_map_marker", 0xF041),
    ("fa_map_o", 0xF278),
    ("fa_map_pin", 0xF276),
    ("fa_map_signs", 0xF277),
    ("fa_markdown", 0xEEAB),
    ("fa_marker", 0xEE6A),
    ("fa_mars", 0xF222),
    ("fa_mars_double", 0xF227),
    ("fa_mars_stroke", 0xF229),
    ("fa_mars_stroke_h", 0xF22B),
    ("fa_mars_stroke_right", 0xF22B),
    ("fa_mars_stroke_up", 0xF22A),
    ("fa_mars_stroke_v", 0xF22A),
    ("fa_martini_glass", 0xEE44),
    ("fa_martini_glass_citrus", 0xEE2A),
    ("fa_martini_glass_empty", 0xF000),
    ("fa_mask", 0xEF07),
    ("fa_masks_theater", 0xEEB6),
    ("fa_mastodon", 0xEDC0),
    ("fa_maxcdn", 0xF136),
    ("fa_maximize", 0xF06F),
    ("fa_mdb", 0xEFB9),
    ("fa_meanpath", 0xF20C),
    ("fa_medal", 0xEE6B),
    ("fa_medapps", 0xED01),
    ("fa_medium", 0xF23A),
    ("fa_medkit", 0xF0FA),
    ("fa_medrt", 0xED02),
    ("fa_meetup", 0xF2E0),
    ("fa_megaport", 0xEE6C),
    ("fa_meh_o", 0xF11A),
    ("fa_memory", 0xEFC5),
    ("fa_mendeley", 0xEF57),
    ("fa_menorah", 0xEED2),
    ("fa_mercury", 0xF223),
    ("fa_message", 0xF27A),
    ("fa_meteor", 0xEF23),
    ("fa_microchip", 0xF2DB),
    ("fa_microphone", 0xF130),
    ("fa_microphone_lines", 0xED03),
    ("fa_microphone_lines_slash", 0xEFC6),
    ("fa_microphone_slash", 0xF131),
    ("fa_microscope", 0xEEAC),
    ("fa_microsoft", 0xED04),
    ("fa_minimize", 0xEF3E),
    ("fa_minus", 0xF068),
    ("fa_minus_circle", 0xF056),
    ("fa_minus_square", 0xF146),
    ("fa_minus_square_o", 0xF147),
    ("fa_mitten", 0xEF58),
    ("fa_mix", 0xED05),
    ("fa_mixcloud", 0xF289),
    ("fa_mizuni", 0xED06),
    ("fa_mobile", 0xED08),
    ("fa_mobile_button", 0xED07),
    ("fa_mobile_phone", 0xF10B),
    ("fa_mobile_screen", 0xED09),
    ("fa_mobile_screen_button", 0xF10B),
    ("fa_modx", 0xF285),
    ("fa_monero", 0xED0A),
    ("fa_money", 0xF0D6),
    ("fa_money_bill", 0xF0D6),
    ("fa_money_bill_1", 0xED0B),
    ("fa_money_bill_1_wave", 0xEFC8),
    ("fa_money_bill_wave", 0xEFC7),
    ("fa_money_check", 0xEFC9),
    ("fa_money_check_dollar", 0xEFCA),
    ("fa_monument", 0xEE6F),
    ("fa_moon", 0xF186),
    ("fa_moon_o", 0xF186),
    ("fa_mortar_board", 0xF19D),
    ("fa_mortar_pestle", 0xEE70),
    ("fa_mosque", 0xEED3),
    ("fa_motorcycle", 0xF21C),
    ("fa_mountain", 0xEF08),
    ("fa_mouse_pointer", 0xF245),
    ("fa_mug_hot", 0xEF59),
    ("fa_mug_saucer", 0xF0F4),
    ("fa_music", 0xF001),
    ("fa_napster", 0xED0C),
    ("fa_navicon", 0xF0C9),
    ("fa_neos", 0xEEAD),
    ("fa_network_wired", 0xEF09),
    ("fa_neuter", 0xF22C),
    ("fa_newspaper", 0xF1EA),
    ("fa_newspaper_o", 0xF1EA),
    ("fa_nimblr", 0xEE71),
    ("fa_node", 0xED44),
    ("fa_node_js", 0xED0D),
    ("fa_not_equal", 0xEFCB),
    ("fa_note_sticky", 0xF249),
    ("fa_notes_medical", 0xED85),
    ("fa_npm", 0xED0E),
    ("fa_ns8", 0xED0F),
    ("fa_nutritionix", 0xED10),
    ("fa_object_group", 0xF247),
    ("fa_object_ungroup", 0xF248),
    ("fa_odnoklassniki", 0xF263),
    ("fa_odnoklassniki_square", 0xF264),
    ("fa_oil_can", 0xEEAE),
    ("fa_ok_sign", 0xF058),
    ("fa_old_republic", 0xEDDA),
    ("fa_om", 0xEED4),
    ("fa_opencart", 0xF23D),
    ("fa_openid", 0xF19B),
    ("fa_opera", 0xF26A),
    ("fa_optin_monster", 0xF23C),
    ("fa_orcid", 0xEFBB),
    ("fa_osi", 0xED45),
    ("fa_otter", 0xEF0A),
    ("fa_outdent", 0xF03B),
    ("fa_page4", 0xED11),
    ("fa_pagelines", 0xF18C),
    ("fa_pager", 0xEF8A),
    ("fa_paint_brush", 0xF1FC),
    ("fa_paint_roller", 0xEE72),
    ("fa_paintbrush", 0xF1FC),
    ("fa_palette", 0xEFCC),
    ("fa_palfed", 0xED12),
    ("fa_pallet", 0xED86),
    ("fa_paper_plane", 0xF1D8),
    ("fa_paper_plane_o", 0xF1D9),
    ("fa_paperclip", 0xF0C6),
    ("fa_parachute_box", 0xEDA1),
    ("fa_paragraph", 0xF1DD),
    ("fa_passport", 0xEE73),
    ("fa_paste", 0xF0EA),
    ("fa_patreon", 0xED13),
    ("fa_pause", 0xF04C),
    ("fa_pause_circle", 0xF28B),
    ("fa_pause_circle_o", 0xF28C),
    ("fa_paw", 0xF1B0),
    ("fa_paypal", 0xF1ED),
    ("fa_peace", 0xEED6),
    ("fa_pen", 0xF01F),
    ("fa_pen_clip", 0xF020),
    ("fa_pen_fancy", 0xEE74),
    ("fa_pen_nib", 0xEE75),
    ("fa_pen_ruler", 0xEE76),
    ("fa_pen_to_square", 0xF044),
    ("fa_pencil", 0xF040),
    ("fa_pencil_square", 0xF14B),
    ("fa_pencil_square_o", 0xF044),
    ("fa_people_carry_box", 0xEDA2),
    ("fa_pepper_hot", 0xEF8B),
    ("fa_percent", 0xF295),
    ("fa_periscope", 0xED14),
    ("fa_person", 0xF183),
    ("fa_person_biking", 0xEFA2),
    ("fa_person_booth", 0xEF24),
    ("fa_person_digging", 0xEFA6),
    ("fa_person_dots_from_line", 0xED7C),
    ("fa_person_dress", 0xF182),
    ("fa_person_hiking", 0xEF02),
    ("fa_person_praying", 0xEEDA),
    ("fa_person_running", 0xEF0C),
    ("fa_person_skating", 0xEF63),
    ("fa_person_skiing", 0xEF65),
    ("fa_person_skiing_nordic", 0xEF66),
    ("fa_person_snowboarding", 0xEF69),
    ("fa_person_swimming", 0xEE8B),
    ("fa_person_walking", 0xEE1D),
    ("fa_person_walking_with_cane", 0xF29D),
    ("fa_phabricator", 0xED15),
    ("fa_phoenix_framework", 0xED16),
    ("fa_phoenix_squadron", 0xEDDB),
    ("fa_phone", 0xF095),
    ("fa_phone_flip", 0xEFA9),
    ("fa_phone_slash", 0xED17),
    ("fa_phone_square", 0xF098),
    ("fa_phone_volume", 0xF2A0),
    ("fa_photo", 0xF03E),
    ("fa_photo_film", 0xEFAB),
    ("fa_php", 0xED6D),
    ("fa_picture_o", 0xF03E),
    ("fa_pie_chart", 0xF200),
    ("fa_pied_piper", 0xF2AE),
    ("fa_pied_piper_alt", 0xF1A8),
    ("fa_pied_piper_hat", 0xEDB0),
    ("fa_pied_piper_pp", 0xF1A7),
    ("fa_piggy_bank", 0xEDA3),
    ("fa_pills", 0xED87),
    ("fa_pinterest", 0xF0D2),
    ("fa_pinterest_p", 0xF231),
    ("fa_pinterest_square", 0xF0D3),
    ("fa_pizza_slice", 0xEF8C),
    ("fa_place_of_worship", 0xEED7),
    ("fa_plane", 0xF072),
    ("fa_plane_arrival", 0xEE77),
    ("fa_plane_departure", 0xEE78),
    ("fa_play", 0xF04B),
    ("fa_play_circle", 0xF144),
    ("fa_play_circle_o", 0xF01D),
    ("fa_playstation", 0xED18),
    ("fa_plug", 0xF1E6),
    ("fa_plus", 0xF067),
    ("fa_plus_circle", 0xF055),
    ("fa_plus_square", 0xF0FE),
    ("fa_plus_square_o", 0xF196),
    ("fa_podcast", 0xF2CE),
    ("fa_poo", 0xF2FE),
    ("fa_poo_storm", 0xEF25),
    ("fa_poop", 0xEEAF),
    ("fa_power_off", 0xF011),
    ("fa_prescription", 0xEE79),
    ("fa_prescription_bottle", 0xED88),
    ("fa_prescription_bottle_medical", 0xED89),
    ("fa_print", 0xF02F),
    ("fa_product_hunt", 0xF288),
    ("fa_pushed", 0xED1A),
    ("fa_puzzle_piece", 0xF12E),
    ("fa_python", 0xED1B),
    ("fa_qq", 0xF1D6),
    ("fa_qrcode", 0xF029),
    ("fa_question", 0xF128),
    ("fa_question_circle", 0xF059),
    ("fa_question_circle_o", 0xF29C),
    ("fa_quinscape", 0xED6F),
    ("fa_quora", 0xF2C4),
    ("fa_quote_left", 0xF10D),
    ("fa_quote_right", 0xF10E),
    ("fa_r_project", 0xEDC1),
    ("fa_ra", 0xF1D0),
    ("fa_radiation", 0xEF5A),
    ("fa_radio", 0xEFBC),
    ("fa_rainbow", 0xEF26),
    ("fa_random", 0xF074),
    ("fa_raspberry_pi", 0xEF5C),
    ("fa_ravelry", 0xF2D9),
    ("fa_react", 0xED46),
    ("fa_reacteurope", 0xEF27),
    ("fa_readme", 0xEDA4),
    ("fa_rebel", 0xF1D0),
    ("fa_receipt", 0xEE0C),
    ("fa_record_vinyl", 0xEFBD),
    ("fa_rectangle_ad", 0xEEBB),
    ("fa_rectangle_list", 0xF022),
    ("fa_rectangle_xmark", 0xF2D4),
    ("fa_recycle", 0xF1B8),
    ("fa_red_river", 0xED1C),
    ("fa_reddit", 0xF1A1),
    ("fa_reddit_alien", 0xF281),
    ("fa_reddit_square", 0xF1A2),
    ("fa_redhat", 0xEF5D),
    ("fa_refresh", 0xF021),
    ("fa_registered", 0xF25D),
    ("fa_remove", 0xF00D),
    ("fa_remove_sign", 0xF057),
    ("fa_renren", 0xF18B),
    ("fa_reorder", 0xF0C9),
    ("fa_repeat", 0xF01E),
    ("fa_repeat_alt", 0xF0B6),
    ("fa_reply", 0xF112),
    ("fa_reply_all", 0xF122),
    ("fa_replyd", 0xED1E),
    ("fa_republican", 0xEF28),
    ("fa_researchgate", 0xEDC2),
    ("fa_resistance", 0xF1D0),
    ("fa_resolving", 0xED1F),
    ("fa_restroom", 0xEF5E),
    ("fa_retweet", 0xF079),
    ("fa_rev", 0xEE7A),
    ("fa_ribbon", 0xEDA5),
    ("fa_right_from_bracket", 0xF2F5),
    ("fa_right_left", 0xF0B5),
    ("fa_right_to_bracket", 0xF2F6),
    ("fa_ring", 0xEF0B),
    ("fa_rmb", 0xF157),
    ("fa_road", 0xF018),
    ("fa_robot", 0xEE0D),
    ("fa_rocket", 0xF135),
    ("fa_rocketchat", 0xED20),
    ("fa_rockrms", 0xED21),
    ("fa_rotate", 0xF2F1),
    ("fa_rotate_left", 0xF2EA),
    ("fa_rotate_right", 0xF2F9),
    ("fa_rouble", 0xF158),
    ("fa_route", 0xEDA6),
    ("fa_rss", 0xF09E),
    ("fa_rss_square", 0xF143),
    ("fa_rub", 0xF158),
    ("fa_ruble", 0xF158),
    ("fa_ruble_sign", 0xF158),
    ("fa_ruler", 0xEE0E),
    ("fa_ruler_combined", 0xEE0F),
    ("fa_ruler_horizontal", 0xEE10),
    ("fa_ruler_vertical", 0xEE11),
    ("fa_rupee", 0xF156),
    ("fa_rupee_sign", 0xF156),
    ("fa_s15", 0xF2CD),
    ("fa_sack_dollar", 0xEF8D),
    ("fa_safari", 0xF267),
    ("fa_salesforce", 0xEF9A),
    ("fa_sass", 0xED49),
    ("fa_satellite", 0xEF5F),
    ("fa_satellite_dish", 0xEF60),
    ("fa_save", 0xF0C7),
    ("fa_scale_balanced", 0xF24E),
    ("fa_scale_unbalanced", 0xEDDF),
    ("fa_scale_unbalanced_flip", 0xEDE0),
    ("fa_schlix", 0xED22),
    ("fa_school", 0xEE12),
    ("fa_scissors", 0xF0C4),
    ("fa_screwdriver", 0xEE13),
    ("fa_screwdriver_wrench", 0xEF70),
    ("fa_scribd", 0xF28A),
    ("fa_scroll", 0xEF0D),
    ("fa_scroll_torah", 0xEEE5),
    ("fa_sd_card", 0xEF61),
    ("fa_search", 0xF002),
    ("fa_search_minus", 0xF010),
    ("fa_search_plus", 0xF00E),
    ("fa_searchengin", 0xED23),
    ("fa_seedling", 0xEDA7),
    ("fa_sellcast", 0xF2DA),
    ("fa_sellsy", 0xF213),
    ("fa_send", 0xF1D8),
    ("fa_send_o", 0xF1D9),
    ("fa_server", 0xF233),
    ("fa_servicestack", 0xED24),
    ("fa_shapes", 0xEEB0),
    ("fa_share", 0xF064),
    ("fa_share_alt", 0xF1E0),
    ("fa_share_alt_square", 0xF1E1),
    ("fa_share_from_square", 0xF14D),
    ("fa_share_nodes", 0xF1E0),
    ("fa_share_square", 0xF14D),
    ("fa_share_square_o", 0xF045),
    ("fa_shekel", 0xF20B),
    ("fa_shekel_sign", 0xF20B),
    ("fa_sheqel", 0xF20B),
    ("fa_shield", 0xF132),
    ("fa_shield_halved", 0xED25),
    ("fa_ship", 0xF21A),
    ("fa_shirt", 0xEE1C),
    ("fa_shirtsinbulk", 0xF214),
    ("fa_shoe_prints", 0xEE14),
    ("fa_shop", 0xEE18),
    ("fa_shopping_bag", 0xF290),
    ("fa_shopping_basket", 0xF291),
    ("fa_shopping_cart", 0xF07A),
    ("fa_shopware", 0xEE7D),
    ("fa_shower", 0xF2CC),
    ("fa_shuffle", 0xF074),
    ("fa_shuttle_space", 0xF197),
    ("fa_sign_hanging", 0xEDA8),
    ("fa_sign_in", 0xF090),
    ("fa_sign_language", 0xF2A7),
    ("fa_sign_out", 0xF08B),
    ("fa_signal", 0xF012),
    ("fa_signature", 0xEE7F),
    ("fa_signing", 0xF2A7),
    ("fa_signs_post", 0xF277),
    ("fa_sim_card", 0xEF62),
    ("fa_simplybuilt", 0xF215),
    ("fa_sistrix", 0xED26),
    ("fa_sitemap", 0xF0E8),
    ("fa_sith", 0xEDDC),
    ("fa_sketch", 0xEF64),
    ("fa_skull", 0xEE15),
    ("fa_skull_crossbones", 0xEF0E),
    ("fa_skyatlas", 0xF216),
    ("fa_skype", 0xF17E),
    ("fa_slack", 0xF198),
    ("fa_slash", 0xEF0F),
    ("fa_sleigh", 0xEF67),
    ("fa_sliders", 0xF1DE),
    ("fa_slideshare", 0xF1E7),
    ("fa_smile_o", 0xF118),
    ("fa_smog", 0xEF29),
    ("fa_smoking", 0xED8C),
    ("fa_snapchat", 0xF2AB),
    ("fa_snapchat_ghost", 0xF2AC),
    ("fa_snapchat_square", 0xF2AD),
    ("fa_snowflake", 0xF2DC),
    ("fa_snowflake_o", 0xF2DC),
    ("fa_snowman", 0xEF6A),
    ("fa_snowplow", 0xEF6B),
    ("fa_soccer_ball_o", 0xF1E3),
    ("fa_socks", 0xEEDF),
    ("fa_solar_panel", 0xEE81),
    ("fa_sort", 0xF0DC),
    ("fa_sort_alpha_asc", 0xF15D),
    ("fa_sort_alpha_desc", 0xF15E),
    ("fa_sort_amount_asc", 0xF160),
    ("fa_sort_amount_desc", 0xF161),
    ("fa_sort_asc", 0xF0DE),
    ("fa_sort_desc", 0xF0DD),
    ("fa_sort_down", 0xF0DD),
    ("fa_sort_numeric_asc", 0xF162),
    ("fa_sort_numeric_desc", 0xF163),
    ("fa_sort_up", 0xF0DE),
    ("fa_soundcloud", 0xF1BE),
    ("fa_sourcetree", 0xEF6C),
    ("fa_spa", 0xEE82),
    ("fa_space_shuttle", 0xF197),
    ("fa_spaghetti_monster_flying", 0xEED5),
    ("fa_speakap", 0xED27),
    ("fa_speaker_deck", 0xEF9B),
    ("fa_spell_check", 0xEFB3),
    ("fa_spider", 0xEF10),
    ("fa_spinner", 0xF110),
    ("fa_splotch", 0xEE83),
    ("fa_spoon", 0xF1B1),
    ("fa_spotify", 0xF1BC),
    ("fa_spray_can", 0xEE84),
    ("fa_spray_can_sparkles", 0xEE97),
    ("fa_square", 0xF0C8),
    ("fa_square_arrow_up_right", 0xF14C),
    ("fa_square_behance", 0xF1B5),
    ("fa_square_caret_down", 0xF150),
    ("fa_square_caret_left", 0xF191),
    ("fa_square_caret_right", 0xF152),
    ("fa_square_caret_up", 0xF151),
    ("fa_square_check", 0xF14A),
    ("fa_square_dribbble", 0xF22E),
    ("fa_square_envelope", 0xF199),
    ("fa_square_facebook", 0xF082),
    ("fa_square_font_awesome_stroke", 0xF0AF),
    ("fa_square_full", 0xED70),
    ("fa_square_git", 0xF1D2),
    ("fa_square_github", 0xF092),
    ("fa_square_google_plus", 0xF0D4),
    ("fa_square_h", 0xF0FD),
    ("fa_square_hacker_news", 0xF2E5),
    ("fa_square_js", 0xF2EF),
    ("fa_square_lastfm", 0xF203),
    ("fa_square_minus", 0xF146),
    ("fa_square_o", 0xF096),
    ("fa_square_odnoklassniki", 0xF264),
    ("fa_square_parking", 0xEFCD),
    ("fa_square_pen", 0xF14B),
    ("fa_square_phone", 0xF098),
    ("fa_square_phone_flip", 0xEFAA),
    ("fa_square_pinterest", 0xF0D3),
    ("fa_square_plus", 0xF0FE),
    ("fa_square_poll_horizontal", 0xEED9),
    ("fa_square_poll_vertical", 0xEED8),
    ("fa_square_reddit", 0xF1A2),
    ("fa_square_root_variable", 0xEEE0),
    ("fa_square_rss", 0xF143),
    ("fa_square_share_nodes", 0xF1E1),
    ("fa_square_snapchat", 0xF2AD),
    ("fa_square_steam", 0xF1B7),
    ("fa_square_tumblr", 0xF174),
    ("fa_square_twitter", 0xF081),
    ("fa_square_up_right", 0xF0B4),
    ("fa_square_viadeo", 0xF2AA),
    ("fa_square_vimeo", 0xF194),
    ("fa_square_whatsapp", 0xED3B),
    ("fa_square_xing", 0xF169),
    ("fa_square_xmark", 0xF2D3),
    ("fa_square_youtube", 0xF166),
    ("fa_squarespace", 0xEE85),
    ("fa_stack_exchange", 0xF18D),
    ("fa_stack_overflow", 0xF16C),
    ("fa_stackpath", 0xEFA1),
    ("fa_stamp", 0xEE86),
    ("fa_star", 0xF005),
    ("fa_star_and_crescent", 0xEEE1),
    ("fa_star_half", 0xF089),
    ("fa_star_half_empty", 0xF123),
    ("fa_star_half_full", 0xF123),
    ("fa_star_half_o", 0xF123),
    ("fa_star_half_stroke", 0xEE87),
    ("fa_star_o", 0xF006),
    ("fa_star_of_david", 0xEEE2),
    ("fa_star_of_life", 0xEEB1),
    ("fa_staylinked", 0xED28),
    ("fa_steam", 0xF1B6),
    ("fa_steam_square", 0xF1B7),
    ("fa_steam_symbol", 0xED29),
    ("fa_step_backward", 0xF048),
    ("fa_step_forward", 0xF051),
    ("fa_sterling_sign", 0xF154),
    ("fa_stethoscope", 0xF0F1),
    ("fa_sticker_mule", 0xED2A),
    ("fa_sticky_note", 0xF249),
    ("fa_sticky_note_o", 0xF24A),
    ("fa_stop", 0xF04D),
    ("fa_stop_circle", 0xF28D),
    ("fa_stop_circle_o", 0xF28E),
    ("fa_stopwatch", 0xF2F2),
    ("fa_store", 0xEE17),
    ("fa_strava", 0xED52),
    ("fa_street_view", 0xF21D),
    ("fa_strikethrough", 0xF0CC),
    ("fa_stripe", 0xED53),
    ("fa_stripe_s", 0xED54),
    ("fa_stroopwafel", 0xEE1A),
    ("fa_studiovinari", 0xED2B),
    ("fa_stumbleupon", 0xF1A4),
    ("fa_stumbleupon_circle", 0xF1A3),
    ("fa_subscript", 0xF12C),
    ("fa_subway", 0xF239),
    ("fa_suitcase", 0xF0F2),
    ("fa_suitcase_medical", 0xF0FA),
    ("fa_suitcase_rolling", 0xEE88),
    ("fa_sun", 0xF185),
    ("fa_sun_o", 0xF185),
    ("fa_superpowers", 0xF2DD),
    ("fa_superscript", 0xF12B),
    ("fa_supple", 0xED2C),
    ("fa_support", 0xF1CD),
    ("fa_suse", 0xEF6D),
    ("fa_swatchbook", 0xEE8A),
    ("fa_swift", 0xEFBE),
    ("fa_symfony", 0xEF9C),
    ("fa_synagogue", 0xEEE3),
    ("fa_syringe", 0xED8D),
    ("fa_table", 0xF0CE),
    ("fa_table_cells", 0xF00A),
    ("fa_table_cells_large", 0xF009),
    ("fa_table_columns", 0xF0DB),
    ("fa_table_list", 0xF00B),
    ("fa_table_tennis_paddle_ball", 0xED71),
    ("fa_tablet", 0xED2E),
    ("fa_tablet_button", 0xED2D),
    ("fa_tablet_screen_button", 0xF10A),
    ("fa_tablets", 0xED8E),
    ("fa_tachograph_digital", 0xEE2F),
    ("fa_tachometer", 0xF0E4),
    ("fa_tag", 0xF02B),
    ("fa_tags", 0xF02C),
    ("fa_tape", 0xEDAA),
    ("fa_tasks", 0xF0AE),
    ("fa_taxi", 0xF1BA),
    ("fa_teamspeak", 0xEDC3),
    ("fa_teeth", 0xEEB4),
    ("fa_teeth_open", 0xEEB5),
    ("fa_telegram", 0xF2C6),
    ("fa_television", 0xF26C),
    ("fa_temperature_empty", 0xF2CB),
    ("fa_temperature_full", 0xF2C7),
    ("fa_temperature_half", 0xF2C9),
    ("fa_temperature_high", 0xEF2A),
    ("fa_temperature_low", 0xEF2B),
    ("fa_temperature_quarter", 0xF2CA),
    ("fa_temperature_three_quarters", 0xF2C8),
    ("fa_tencent_weibo", 0xF1D5),
    ("fa_tenge_sign", 0xEF6E),
    ("fa_terminal", 0xF120),
    ("fa_text_height", 0xF034),
    ("fa_text_slash", 0xEFAC),
    ("fa_text_width", 0xF035),
    ("fa_th", 0xF00A),
    ("fa_th_large", 0xF009),
    ("fa_th_list", 0xF00B),
    ("fa_the_red_yeti", 0xEEE4),
    ("fa_themeco", 0xEE8D),
    ("fa_themeisle", 0xF2B2),
    ("fa_thermometer", 0xF2C7),
    ("fa_thermometer_0", 0xF2CB),
    ("fa_thermometer_1", 0xF2CA),
    ("fa_thermometer_2", 0xF2C9),
    ("fa_thermometer_3", 0xF2C8),
    ("fa_thermometer_4", 0xF2C7),
    ("fa_thermometer_alt", 0xED8F),
    ("fa_thermometer_empty", 0xF2CB),
    ("fa_thermometer_full", 0xF2C7),
    ("fa_thermometer_half", 0xF2C9),
    ("fa_thermometer_quarter", 0xF2CA),
    ("fa_thermometer_three_quarters", 0xF2C8),
    ("fa_think_peaks", 0xEF19),
    ("fa_thumb_tack", 0xF08D),
    ("fa_thumbs_down", 0xF165),
    ("fa_thumbs_o_down", 0xF088),
    ("fa_thumbs_o_up", 0xF087),
    ("fa_thumbs_up", 0xF164),
    ("fa_thumbtack", 0xF08D),
    ("fa_ticket", 0xF145),
    ("fa_ticket_simple", 0xED30),
    ("fa_times", 0xF00D),
    ("fa_times_circle", 0xF057),
    ("fa_times_circle_o", 0xF05C),
    ("fa_times_rectangle", 0xF2D3),
    ("fa_times_rectangle_o", 0xF2D4),
    ("fa_tint", 0xF043),
    ("fa_toggle_down", 0xF150),
    ("fa_toggle_left", 0xF191),
    ("fa_toggle_off", 0xF204),
    ("fa_toggle_on", 0xF205),
    ("fa_toggle_right", 0xF152),
    ("fa_toggle_up", 0xF151),
    ("fa_toilet", 0xEF6F),
    ("fa_toilet_paper", 0xEF11),
    ("fa_toolbox", 0xEE1B),
    ("fa_tooth", 0xEE90),
    ("fa_torii_gate", 0xEEE6),
    ("fa_tornado", 0xEF2D),
    ("fa_tower_broadcast", 0xEDE3),
    ("fa_tractor", 0xEF12),
    ("fa_trade_federation", 0xEDDD),
    ("fa_trademark", 0xF25C),
    ("fa_traffic_light", 0xEEB7),
    ("fa_train", 0xF238),
    ("fa_train_subway", 0xF239),
    ("fa_transgender", 0xF224),
    ("fa_transgender_alt", 0xF225),
    ("fa_trash", 0xF1F8),
    ("fa_trash_arrow_up", 0xEF90),
    ("fa_trash_can", 0xF014),
    ("fa_trash_can_arrow_up", 0xEF91),
    ("fa_trash_o", 0xF014),
    ("fa_tree", 0xF1BB),
    ("fa_trello", 0xF181),
    ("fa_triangle_exclamation", 0xF071),
    ("fa_tripadvisor", 0xF262),
    ("fa_trophy", 0xF091),
    ("fa_truck", 0xF0D1),
    ("fa_truck_fast", 0xED8B),
    ("fa_truck_medical", 0xF0F9),
    ("fa_truck_monster", 0xEEB8),
    ("fa_truck_moving", 0xEDAC),
    ("fa_truck_pickup", 0xEEB9),
    ("fa_truck_ramp_box", 0xEDAB),
    ("fa_try", 0xF195),
    ("fa_tty", 0xF1E4),
    ("fa_tumblr", 0xF173),
    ("fa_tumblr_square", 0xF174),
    ("fa_turkish_lira", 0xF195),
    ("fa_turn_down", 0xF2F8),
    ("fa_turn_up", 0xF2FA),
    ("fa_tv", 0xF26C),
    ("fa_twitch", 0xF1E8),
    ("fa_twitter", 0xF099),
    ("fa_twitter_square", 0xF081),
    ("fa_typo3", 0xED55),
    ("fa_uber", 0xED31),
    ("fa_ubuntu", 0xEF72),
    ("fa_uikit", 0xED32),
    ("fa_umbraco", 0xEFBF),
    ("fa_umbrella", 0xF0E9),
    ("fa_umbrella_beach", 0xEE91),
    ("fa_underline", 0xF0CD),
    ("fa_undo", 0xF0E2),
    ("fa_uniregistry", 0xED33),
    ("fa_universal_access", 0xF29A),
    ("fa_university", 0xF19C),
    ("fa_unlink", 0xF127),
    ("fa_unlock", 0xF09C),
    ("fa_unlock_alt", 0xF13E),
    ("fa_unlock_keyhole", 0xF13E),
    ("fa_unsorted", 0xF0DC),
    ("fa_untappd", 0xED34),
    ("fa_up_down", 0xF09F),
    ("fa_up_down_left_right", 0xF0B2),
    ("fa_up_right_and_down_left_from_center", 0xED4F),
    ("fa_up_right_from_square", 0xF0B3),
    ("fa_upload", 0xF093),
    ("fa_ups", 0xEF73),
    ("fa_usb", 0xF287),
    ("fa_usd", 0xF155),
    ("fa_user", 0xF007),
    ("fa_user_astronaut", 0xEDC5),
    ("fa_user_check", 0xEDC6),
    ("fa_user_circle", 0xF2BD),
    ("fa_user_circle_o", 0xF2BE),
    ("fa_user_clock", 0xEDC7),
    ("fa_user_doctor", 0xF0F0),
    ("fa_user_gear", 0xEDC8),
    ("fa_user_graduate", 0xEDCB),
    ("fa_user_group", 0xEDCA),
    ("fa_user_injured", 0xEF13),
    ("fa_user_large", 0xED35),
    ("fa_user_large_slash", 0xEDC4),
    ("fa_user_lock", 0xEDCC),
    ("fa_user_md", 0xF0F0),
    ("fa_user_minus", 0xEDCD),
    ("fa_user_ninja", 0xEDCE),
    ("fa_user_nurse", 0xEF92),
    ("fa_user_o", 0xF2C0),
    ("fa_user_pen", 0xEDC9),
    ("fa_user_plus", 0xF234),
    ("fa_user_secret", 0xF21B),
    ("fa_user_shield", 0xEDCF),
    ("fa_user_slash", 0xEDD0),
    ("fa_user_tag", 0xEDD1),
    ("fa_user_tie", 0xEDD2),
    ("fa_user_times", 0xF235),
    ("fa_user_xmark", 0xF235),
    ("fa_users", 0xF0C0),
    ("fa_users_gear", 0xEDD3),
    ("fa_usps", 0xEF74),
    ("fa_ussunnah", 0xED36),
    ("fa_utensils", 0xF0F5),
    ("fa_vaadin", 0xED37),
    ("fa_van_shuttle", 0xEE7E),
    ("fa_vcard", 0xF2BB),
    ("fa_vcard_o", 0xF2BC),
    ("fa_vector_square", 0xEE92),
    ("fa_venus", 0xF221),
    ("fa_venus_double", 0xF226),
    ("fa_venus_mars", 0xF228),
    ("fa_viacoin", 0xF237),
    ("fa_viadeo", 0xF2A9),
    ("fa_viadeo_square", 0xF2AA),
    ("fa_vial", 0xED90),
    ("fa_vials", 0xED91),
    ("fa_viber", 0xED38),
    ("fa_video", 0xF03D),
    ("fa_video_camera", 0xF03D),
    ("fa_video_slash", 0xEDAD),
    ("fa_vihara", 0xEEE7),
    ("fa_vimeo", 0xED39),
    ("fa_vimeo_square", 0xF194),
    ("fa_vimeo_v", 0xF27D),
    ("fa_vine", 0xF1CA),
    ("fa_vk", 0xF189),
    ("fa_vnv", 0xED3A),
    ("fa_voicemail", 0xEFB4),
    ("fa_volcano", 0xEF2E),
    ("fa_volleyball", 0xED72),
    ("fa_volume_control_phone", 0xF2A0),
    ("fa_volume_down", 0xF027),
    ("fa_volume_high", 0xF028),
    ("fa_volume_low", 0xF027),
    ("fa_volume_off", 0xF026),
    ("fa_volume_up", 0xF028),
    ("fa_volume_xmark", 0xEEE8),
    ("fa_vr_cardboard", 0xEF14),
    ("fa_vuejs", 0xED4A),
    ("fa_walkie_talkie", 0xEFC0),
    ("fa_wallet", 0xEE1E),
    ("fa_wand_magic", 0xF0D0),
    ("fa_wand_sparkles", 0xEF15),
    ("fa_warehouse", 0xED92),
    ("fa_warning", 0xF071),
    ("fa_water", 0xEF30),
    ("fa_water_ladder", 0xEE8C),
    ("fa_wave_square", 0xEF9D),
    ("fa_waze", 0xEF9E),
    ("fa_wechat", 0xF1D7),
    ("fa_weebly", 0xEE93),
    ("fa_weibo", 0xF18A),
    ("fa_weight_hanging", 0xEE94),
    ("fa_weight_scale", 0xED93),
    ("fa_weixin", 0xF1D7),
    ("fa_whatsapp", 0xF232),
    ("fa_wheelchair", 0xF193),
    ("fa_wheelchair_alt", 0xF29B),
    ("fa_whiskey_glass", 0xEF4A),
    ("fa_whmcs", 0xED3C),
    ("fa_wifi", 0xF1EB),
    ("fa_wikipedia_w", 0xF266),
    ("fa_wind", 0xEF16),
    ("fa_window_close", 0xF2D3),
    ("fa_window_close_o", 0xF2D4),
    ("fa_window_maximize", 0xF2D0),
    ("fa_window_minimize", 0xF2D1),
    ("fa_window_restore", 0xF2D2),
    ("fa_windows", 0xF17A),
    ("fa_wine_bottle", 0xEF17),
    ("fa_wine_glass", 0xEDAE),
    ("fa_wine_glass_empty", 0xEE95),
    ("fa_wix", 0xEE96),
    ("fa_wizards_of_the_coast", 0xEF18),
    ("fa_wolf_pack_battalion", 0xEDDE),
    ("fa_won", 0xF159),
    ("fa_won_sign", 0xF159),
    ("fa_wordpress", 0xF19A),
    ("fa_wordpress_simple", 0xED3D),
    ("fa_wpbeginner", 0xF297),
    ("fa_wpexplorer", 0xF2DE),
    ("fa_wpforms", 0xF298),
    ("fa_wpressr", 0xED1D),
    ("fa_wrench", 0xF0AD),
    ("fa_x_ray", 0xED94),
    ("fa_xbox", 0xED3E),
    ("fa_xing", 0xF168),
    ("fa_xing_square", 0xF169),
    ("fa_xmark", 0xF00D),
    ("fa_y_combinator", 0xF23B),
    ("fa_y_combinator_square", 0xF1D4),
    ("fa_yahoo", 0xF19E),
    ("fa_yammer", 0xEF9F),
    ("fa_yandex", 0xED3F),
    ("fa_yandex_international", 0xED40),
    ("fa_yarn", 0xEF75),
    ("fa_yc", 0xF23B),
    ("fa_yc_square", 0xF1D4),
    ("fa_yelp", 0xF1E9),
    ("fa_yen", 0xF157),
    ("fa_yen_sign", 0xF157),
    ("fa_yin_yang", 0xEEE9),
    ("fa_yoast", 0xF2B1),
    ("fa_youtube", 0xF16A),
    ("fa_youtube_play", 0xF16A),
    ("fa_youtube_square", 0xF166),
    ("fa_zhihu", 0xEEBA),
    ("fae_apple_fruit", 0xE29E),
    ("fae_atom", 0xE27F),
    ("fae_bacteria", 0xE280),
    ("fae_banana", 0xE281),
    ("fae_bath", 0xE282),
    ("fae_bed", 0xE283),
    ("fae_benzene", 0xE284),
    ("fae_bigger", 0xE285),
    ("fae_biohazard", 0xE286),
    ("fae_blogger_circle", 0xE287),
    ("fae_blogger_square", 0xE288),
    ("fae_bones", 0xE289),
    ("fae_book_open", 0xE28A),
    ("fae_book_open_o", 0xE28B),
    ("fae_brain", 0xE28C),
    ("fae_bread", 0xE28D),
    ("fae_butterfly", 0xE28E),
    ("fae_carot", 0xE28F),
    ("fae_cc_by", 0xE290),
    ("fae_cc_cc", 0xE291),
    ("fae_cc_nc", 0xE292),
    ("fae_cc_nc_eu", 0xE293),
    ("fae_cc_nc_jp", 0xE294),
    ("fae_cc_nd", 0xE295),
    ("fae_cc_remix", 0xE296),
    ("fae_cc_sa", 0xE297),
    ("fae_cc_share", 0xE298),
    ("fae_cc_zero", 0xE299),
    ("fae_checklist_o", 0xE29A),
    ("fae_cheese", 0xE264),
    ("fae_cherry", 0xE29B),
    ("fae_chess_bishop", 0xE29C),
    ("fae_chess_horse", 0xE25F),
    ("fae_chess_king", 0xE260),
    ("fae_chess_pawn", 0xE261),
    ("fae_chess_queen", 0xE262),
    ("fae_chess_tower", 0xE263),
    ("fae_chicken_thigh", 0xE29F),
    ("fae_chilli", 0xE265),
    ("fae_chip", 0xE266),
    ("fae_cicling", 0xE267),
    ("fae_cloud", 0xE268),
    ("fae_cockroach", 0xE269),
    ("fae_coffe_beans", 0xE26A),
    ("fae_coins", 0xE26B),
    ("fae_comb", 0xE26C),
    ("fae_comet", 0xE26D),
    ("fae_crown", 0xE26E),
    ("fae_cup_coffe", 0xE26F),
    ("fae_dice", 0xE270),
    ("fae_disco", 0xE271),
    ("fae_dna", 0xE272),
    ("fae_donut", 0xE273),
    ("fae_dress", 0xE274),
    ("fae_drop", 0xE275),
    ("fae_ello", 0xE276),
    ("fae_envelope_open", 0xE277),
    ("fae_envelope_open_o", 0xE278),
    ("fae_equal", 0xE279),
    ("fae_equal_bigger", 0xE27A),
    ("fae_feedly", 0xE27B),
    ("fae_file_export", 0xE27C),
    ("fae_file_import", 0xE27D),
    ("fae_fingerprint", 0xE23F),
    ("fae_floppy", 0xE240),
    ("fae_footprint", 0xE241),
    ("fae_freecodecamp", 0xE242),
    ("fae_galaxy", 0xE243),
    ("fae_galery", 0xE244),
    ("fae_gift_card", 0xE2A0),
    ("fae_glass", 0xE245),
    ("fae_google_drive", 0xE246),
    ("fae_google_play", 0xE247),
    ("fae_gps", 0xE248),
    ("fae_grav", 0xE249),
    ("fae_guitar", 0xE24A),
    ("fae_gut", 0xE24B),
    ("fae_halter", 0xE24C),
    ("fae_hamburger", 0xE24D),
    ("fae_hat", 0xE24E),
    ("fae_hexagon", 0xE24F),
    ("fae_high_heel", 0xE250),
    ("fae_hotdog", 0xE251),
    ("fae_ice_cream", 0xE252),
    ("fae_id_card", 0xE253),
    ("fae_imdb", 0xE254),
    ("fae_infinity", 0xE255),
    ("fae_injection", 0xE2A1),
    ("fae_isle", 0xE2A2),
    ("fae_java", 0xE256),
    ("fae_layers", 0xE257),
    ("fae_lips", 0xE258),
    ("fae_lipstick", 0xE259),
    ("fae_liver", 0xE25A),
    ("fae_lollipop", 0xE2A3),
    ("fae_loyalty_card", 0xE2A4),
    ("fae_lung", 0xE25B),
    ("fae_makeup_brushes", 0xE25C),
    ("fae_maximize", 0xE25D),
    ("fae_meat", 0xE2A5),
    ("fae_medicine", 0xE221),
    ("fae_microscope", 0xE222),
    ("fae_milk_bottle", 0xE223),
    ("fae_minimize", 0xE224),
    ("fae_molecule", 0xE225),
    ("fae_moon_cloud", 0xE226),
    ("fae_mountains", 0xE2A6),
    ("fae_mushroom", 0xE227),
    ("fae_mustache", 0xE228),
    ("fae_mysql", 0xE229),
    ("fae_nintendo", 0xE22A),
    ("fae_orange", 0xE2A7),
    ("fae_palette_color", 0xE22B),
    ("fae_peach", 0xE2A8),
    ("fae_pear", 0xE2A9),
    ("fae_pi", 0xE22C),
    ("fae_pizza", 0xE22D),
    ("fae_planet", 0xE22E),
    ("fae_plant", 0xE22F),
    ("fae_playstation", 0xE230),
    ("fae_poison", 0xE231),
    ("fae_popcorn", 0xE232),
    ("fae_popsicle", 0xE233),
    ("fae_pulse", 0xE234),
    ("fae_python", 0xE235),
    ("fae_quora_circle", 0xE236),
    ("fae_quora_square", 0xE237),
    ("fae_radioactive", 0xE238),
    ("fae_raining", 0xE239),
    ("fae_real_heart", 0xE23A),
    ("fae_refrigerator", 0xE23B),
    ("fae_restore", 0xE23C),
    ("fae_ring", 0xE23D),
    ("fae_ruby", 0xE23E),
    ("fae_ruby_o", 0xE21E),
    ("fae_ruler", 0xE21F),
    ("fae_shirt", 0xE218),
    ("fae_slash", 0xE216),
    ("fae_smaller", 0xE200),
    ("fae_snowing", 0xE201),
    ("fae_soda", 0xE202),
    ("fae_sofa", 0xE203),
    ("fae_soup", 0xE204),
    ("fae_spermatozoon", 0xE205),
    ("fae_spin_double", 0xE206),
    ("fae_stomach", 0xE207),
    ("fae_storm", 0xE208),
    ("fae_sun_cloud", 0xE21D),
    ("fae_sushi", 0xE21A),
    ("fae_tacos", 0xE219),
    ("fae_telegram", 0xE217),
    ("fae_telegram_circle", 0xE215),
    ("fae_telescope", 0xE209),
    ("fae_thermometer", 0xE20A),
    ("fae_thermometer_high", 0xE20B),
    ("fae_thermometer_low", 0xE20C),
    ("fae_thin_close", 0xE20D),
    ("fae_toilet", 0xE20E),
    ("fae_tools", 0xE20F),
    ("fae_tooth", 0xE210),
    ("fae_tree", 0xE21C),
    ("fae_triangle_ruler", 0xE21B),
    ("fae_umbrella", 0xE220),
    ("fae_uterus", 0xE211),
    ("fae_virus", 0xE214),
    ("fae_w3c", 0xE212),
    ("fae_walking", 0xE213),
    ("fae_wallet", 0xE25E),
    ("fae_wind", 0xE27E),
    ("fae_xbox", 0xE29D),
    ("iec_power", 0x23FB),
    ("iec_power_off", 0x2B58),
    ("iec_power_on", 0x23FD),
    ("iec_sleep_mode", 0x23FE),
    ("iec_toggle_power", 0x23FC),
    ("indent_dotted_guide", 0xE621),
    ("indent_line", 0xE621),
    ("indentation_line", 0xE621),
    ("linux_almalinux", 0xF31D),
    ("linux_alpine", 0xF300),
    ("linux_aosc", 0xF301),
    ("linux_apple", 0xF302),
    ("linux_archcraft", 0xF345),
    ("linux_archlabs", 0xF31E),
    ("linux_archlinux", 0xF303),
    ("linux_arcolinux", 0xF346),
    ("linux_arduino", 0xF34B),
    ("linux_artix", 0xF31F),
    ("linux_awesome", 0xF354),
    ("linux_biglinux", 0xF347),
    ("linux_bspwm", 0xF355),
    ("linux_budgie", 0xF320),
    ("linux_centos", 0xF304),
    ("linux_cinnamon", 0xF35F),
    ("linux_codeberg", 0xF330),
    ("linux_coreos", 0xF305),
    ("linux_crystal", 0xF348),
    ("linux_debian", 0xF306),
    ("linux_deepin", 0xF321),
    ("linux_devuan", 0xF307),
    ("linux_docker", 0xF308),
    ("linux_dwm", 0xF356),
    ("linux_elementary", 0xF309),
    ("linux_endeavour", 0xF322),
    ("linux_enlightenment", 0xF357),
    ("linux_fdroid", 0xF36A),
    ("linux_fedora", 0xF30A),
    ("linux_fedora_inverse", 0xF30B),
    ("linux_ferris", 0xF323),
    ("linux_flathub", 0xF324),
    ("linux_fluxbox", 0xF358),
    ("linux_forgejo", 0xF335),
    ("linux_fosdem", 0xF36B),
    ("linux_freebsd", 0xF30C),
    ("linux_freecad", 0xF336),
    ("linux_freedesktop", 0xF360),
    ("linux_garuda", 0xF337),
    ("linux_gentoo", 0xF30D),
    ("linux_gimp", 0xF338),
    ("linux_gitea", 0xF339),
    ("linux_gnome", 0xF361),
    ("linux_gnu_guix", 0xF325),
    ("linux_gtk", 0xF362),
    ("linux_hyperbola", 0xF33A),
    ("linux_hyprland", 0xF359),
    ("linux_i3", 0xF35A),
    ("linux_illumos", 0xF326),
    ("linux_inkscape", 0xF33B),
    ("linux_jwm", 0xF35B),
    ("linux_kali_linux", 0xF327),
    ("linux_kde", 0xF373),
    ("linux_kde_neon", 0xF331),
    ("linux_kde_plasma", 0xF332),
    ("linux_kdenlive", 0xF33C),
    ("linux_kicad", 0xF34C),
    ("linux_krita", 0xF33D),
    ("linux_kubuntu", 0xF333),
    ("linux_kubuntu_inverse", 0xF334),
    ("linux_leap", 0xF37E),
    ("linux_libreoffice", 0xF376),
    ("linux_libreofficebase", 0xF377),
    ("linux_libreofficecalc", 0xF378),
    ("linux_libreofficedraw", 0xF379),
    ("linux_libreofficeimpress", 0xF37A),
    ("linux_libreofficemath", 0xF37B),
    ("linux_libreofficewriter", 0xF37C),
    ("linux_linuxmint", 0xF30E),
    ("linux_linuxmint_inverse", 0xF30F),
    ("linux_locos", 0xF349),
    ("linux_lxde", 0xF363),
    ("linux_lxle", 0xF33E),
    ("linux_lxqt", 0xF364),
    ("linux_mageia", 0xF310),
    ("linux_mandriva", 0xF311),
    ("linux_manjaro", 0xF312),
    ("linux_mate", 0xF365),
    ("linux_mpv", 0xF36E),
    ("linux_mxlinux", 0xF33F),
    ("linux_neovim", 0xF36F),
    ("linux_nixos", 0xF313),
    ("linux_nobara", 0xF380),
    ("linux_octoprint", 0xF34D),
    ("linux_openbsd", 0xF328),
    ("linux_openscad", 0xF34E),
    ("linux_opensuse", 0xF314),
    ("linux_osh", 0xF34F),
    ("linux_oshwa", 0xF350),
    ("linux_osi", 0xF36C),
    ("linux_parabola", 0xF340),
    ("linux_parrot", 0xF329),
    ("linux_pop_os", 0xF32A),
    ("linux_postmarketos", 0xF374),
    ("linux_prusaslicer", 0xF351),
    ("linux_puppy", 0xF341),
    ("linux_qt", 0xF375),
    ("linux_qtile", 0xF35C),
    ("linux_qubesos", 0xF342),
    ("linux_raspberry_pi", 0xF315),
    ("linux_redhat", 0xF316),
    ("linux_reprap", 0xF352),
    ("linux_riscv", 0xF353),
    ("linux_river", 0xF381),
    ("linux_rocky_linux", 0xF32B),
    ("linux_sabayon", 0xF317),
    ("linux_slackware", 0xF318),
    ("linux_slackware_inverse", 0xF319),
    ("linux_snappy", 0xF32C),
    ("linux_solus", 0xF32D),
    ("linux_sway", 0xF35D),
    ("linux_tails", 0xF343),
    ("linux_thunderbird", 0xF370),
    ("linux_tor", 0xF371),
    ("linux_trisquel", 0xF344),
    ("linux_tumbleweed", 0xF37D),
    ("linux_tux", 0xF31A),
    ("linux_typst", 0xF37F),
    ("linux_ubuntu", 0xF31B),
    ("linux_ubuntu_inverse", 0xF31C),
    ("linux_vanilla", 0xF366),
    ("linux_void", 0xF32E),
    ("linux_vscodium", 0xF372),
    ("linux_wayland", 0xF367),
    ("linux_wikimedia", 0xF36D),
    ("linux_xerolinux", 0xF34A),
    ("linux_xfce", 0xF368),
    ("linux_xmonad", 0xF35E),
    ("linux_xorg", 0xF369),
    ("linux_zorin", 0xF32F),
    ("md_ab_testing", 0xF01C9),
    ("md_abacus", 0xF16E0),
    ("md_abjad_arabic", 0xF1328),
    ("md_abjad_hebrew", 0xF1329),
    ("md_abugida_devanagari", 0xF132A),
    ("md_abugida_thai", 0xF132B),
    ("md_access_point", 0xF0003),
    ("md_access_point_check", 0xF1538),
    ("md_access_point_minus", 0xF1539),
    ("md_access_point_network", 0xF0002),
    ("md_access_point_network_off", 0xF0BE1),
    ("md_access_point_off", 0xF1511),
    ("md_access_point_plus", 0xF153A),
    ("md_access_point_remove", 0xF153B),
    ("md_account", 0xF0004),
    ("md_account_alert", 0xF0005),
    ("md_account_alert_outline", 0xF0B50),
    ("md_account_arrow_down", 0xF1868),
    ("md_account_arrow_down_outline", 0xF1869),
    ("md_account_arrow_left", 0xF0B51),
    ("md_account_arrow_left_outline", 0xF0B52),
    ("md_account_arrow_right", 0xF0B53),
    ("md_account_arrow_right_outline", 0xF0B54),
    ("md_account_arrow_up", 0xF1867),
    ("md_account_arrow_up_outline", 0xF186A),
    ("md_account_box", 0xF0006),
    ("md_account_box_multiple", 0xF0934),
    ("md_account_box_multiple_outline", 0xF100A),
    ("md_account_box_outline", 0xF0007),
    ("md_account_cancel", 0xF12DF),
    ("md_account_cancel_outline", 0xF12E0),
    ("md_account_cash", 0xF1097),
    ("md_account_cash_outline", 0xF1098),
    ("md_account_check", 0xF0008),
    ("md_account_check_outline", 0xF0BE2),
    ("md_account_child", 0xF0A89),
    ("md_account_child_circle", 0xF0A8A),
    ("md_account_child_outline", 0xF10C8),
    ("md_account_circle", 0xF0009),
    ("md_account_circle_outline", 0xF0B55),
    ("md_account_clock", 0xF0B56),
    ("md_account_clock_outline", 0xF0B57),
    ("md_account_cog", 0xF1370),
    ("md_account_cog_outline", 0xF1371),
    ("md_account_convert", 0xF000A),
    ("md_account_convert_outline", 0xF1301),
    ("md_account_cowboy_hat", 0xF0E9B),
    ("md_account_cowboy_hat_outline", 0xF17F3),
    ("md_account_details", 0xF0631),
    ("md_account_details_outline", 0xF1372),
    ("md_account_edit", 0xF06BC),
    ("md_account_edit_outline", 0xF0FFB),
    ("md_account_eye", 0xF0420),
    ("md_account_eye_outline", 0xF127B),
    ("md_account_filter", 0xF0936),
    ("md_account_filter_outline", 0xF0F9D),
    ("md_account_group", 0xF0849),
    ("md_account_group_outline", 0xF0B58),
    ("md_account_hard_hat", 0xF05B5),
    ("md_account_hard_hat_outline", 0xF1A1F),
    ("md_account_heart", 0xF0899),
    ("md_account_heart_outline", 0xF0BE3),
    ("md_account_injury", 0xF1815),
    ("md_account_injury_outline", 0xF1816),
    ("md_account_key", 0xF000B),
    ("md_account_key_outline", 0xF0BE4),
    ("md_account_lock", 0xF115E),
    ("md_account_lock_open", 0xF1960),
    ("md_account_lock_open_outline", 0xF1961),
    ("md_account_lock_outline", 0xF115F),
    ("md_account_minus", 0xF000D),
    ("md_account_minus_outline", 0xF0AEC),
    ("md_account_multiple", 0xF000E),
    ("md_account_multiple_check", 0xF08C5),
    ("md_account_multiple_check_outline", 0xF11FE),
    ("md_account_multiple_minus", 0xF05D3),
    ("md_account_multiple_minus_outline", 0xF0BE5),
    ("md_account_multiple_outline", 0xF000F),
    ("md_account_multiple_plus", 0xF0010),
    ("md_account_multiple_plus_outline", 0xF0800),
    ("md_account_multiple_remove", 0xF120A),
    ("md_account_multiple_remove_outline", 0xF120B),
    ("md_account_music", 0xF0803),
    ("md_account_music_outline", 0xF0CE9),
    ("md_account_network", 0xF0011),
    ("md_account_network_outline", 0xF0BE6),
    ("md_account_off", 0xF0012),
    ("md_account_off_outline", 0xF0BE7),
    ("md_account_outline", 0xF0013),
    ("md_account_plus", 0xF0014),
    ("md_account_plus_outline", 0xF0801),
    ("md_account_question", 0xF0B59),
    ("md_account_question_outline", 0xF0B5A),
    ("md_account_reactivate", 0xF152B),
    ("md_account_reactivate_outline", 0xF152C),
    ("md_account_remove", 0xF0015),
    ("md_account_remove_outline", 0xF0AED),
    ("md_account_school", 0xF1A20),
    ("md_account_school_outline", 0xF1A21),
    ("md_account_search", 0xF0016),
    ("md_account_search_outline", 0xF0935),
    ("md_account_settings", 0xF0630),
    ("md_account_settings_outline", 0xF10C9),
    ("md_account_star", 0xF0017),
    ("md_account_star_outline", 0xF0BE8),
    ("md_account_supervisor", 0xF0A8B),
    ("md_account_supervisor_circle", 0xF0A8C),
    ("md_account_supervisor_circle_outline", 0xF14EC),
    ("md_account_supervisor_outline", 0xF112D),
    ("md_account_switch", 0xF0019),
    ("md_account_switch_outline", 0xF04CB),
    ("md_account_sync", 0xF191B),
    ("md_account_sync_outline", 0xF191C),
    ("md_account_tie", 0xF0CE3),
    ("md_account_tie_hat", 0xF1898),
    ("md_account_tie_hat_outline", 0xF1899),
    ("md_account_tie_outline", 0xF10CA),
    ("md_account_tie_voice", 0xF1308),
    ("md_account_tie_voice_off", 0xF130A),
    ("md_account_tie_voice_off_outline", 0xF130B),
    ("md_account_tie_voice_outline", 0xF1309),
    ("md_account_tie_woman", 0xF1A8C),
    ("md_account_voice", 0xF05CB),
    ("md_account_voice_off", 0xF0ED4),
    ("md_account_wrench", 0xF189A),
    ("md_account_wrench_outline", 0xF189B),
    ("md_adjust", 0xF001A),
    ("md_advertisements", 0xF192A),
    ("md_advertisements_off", 0xF192B),
    ("md_air_conditioner", 0xF001B),
    ("md_air_filter", 0xF0D43),
    ("md_air_horn", 0xF0DAC),
    ("md_air_humidifier", 0xF1099),
    ("md_air_humidifier_off", 0xF1466),
    ("md_air_purifier", 0xF0D44),
    ("md_airbag", 0xF0BE9),
    ("md_airballoon", 0xF001C),
    ("md_airballoon_outline", 0xF100B),
    ("md_airplane", 0xF001D),
    ("md_airplane_alert", 0xF187A),
    ("md_airplane_check", 0xF187B),
    ("md_airplane_clock", 0xF187C),
    ("md_airplane_cog", 0xF187D),
    ("md_airplane_edit", 0xF187E),
    ("md_airplane_landing", 0xF05D4),
    ("md_airplane_marker", 0xF187F),
    ("md_airplane_minus", 0xF1880),
    ("md_airplane_off", 0xF001E),
    ("md_airplane_plus", 0xF1881),
    ("md_airplane_remove", 0xF1882),
    ("md_airplane_search", 0xF1883),
    ("md_airplane_settings", 0xF1884),
    ("md_airplane_takeoff", 0xF05D5),
    ("md_airport", 0xF084B),
    ("md_alarm", 0xF0020),
    ("md_alarm_bell", 0xF078E),
    ("md_alarm_check", 0xF0021),
    ("md_alarm_light", 0xF078F),
    ("md_alarm_light_off", 0xF171E),
    ("md_alarm_light_off_outline", 0xF171F),
    ("md_alarm_light_outline", 0xF0BEA),
    ("md_alarm_multiple", 0xF0022),
    ("md_alarm_note", 0xF0E71),
    ("md_alarm_note_off", 0xF0E72),
    ("md_alarm_off", 0xF0023),
    ("md_alarm_panel", 0xF15C4),
    ("md_alarm_panel_outline", 0xF15C5),
    ("md_alarm_plus", 0xF0024),
    ("md_alarm_snooze", 0xF068E),
    ("md_album", 0xF0025),
    ("md_alert", 0xF0026),
    ("md_alert_box", 0xF0027),
    ("md_alert_box_outline", 0xF0CE4),
    ("md_alert_circle", 0xF0028),
    ("md_alert_circle_check", 0xF11ED),
    ("md_alert_circle_check_outline", 0xF11EE),
    ("md_alert_circle_outline", 0xF05D6),
    ("md_alert_decagram", 0xF06BD),
    ("md_alert_decagram_outline", 0xF0CE5),
    ("md_alert_minus", 0xF14BB),
    ("md_alert_minus_outline", 0xF14BE),
    ("md_alert_octagon", 0xF0029),
    ("md_alert_octagon_outline", 0xF0CE6),
    ("md_alert_octagram", 0xF0767),
    ("md_alert_octagram_outline", 0xF0CE7),
    ("md_alert_outline", 0xF002A),
    ("md_alert_plus", 0xF14BA),
    ("md_alert_plus_outline", 0xF14BD),
    ("md_alert_remove", 0xF14BC),
    ("md_alert_remove_outline", 0xF14BF),
    ("md_alert_rhombus", 0xF11CE),
    ("md_alert_rhombus_outline", 0xF11CF),
    ("md_alien", 0xF089A),
    ("md_alien_outline", 0xF10CB),
    ("md_align_horizontal_center", 0xF11C3),
    ("md_align_horizontal_distribute", 0xF1962),
    ("md_align_horizontal_left", 0xF11C2),
    ("md_align_horizontal_right", 0xF11C4),
    ("md_align_vertical_bottom", 0xF11C5),
    ("md_align_vertical_center", 0xF11C6),
    ("md_align_vertical_distribute", 0xF1963),
    ("md_align_vertical_top", 0xF11C7),
    ("md_all_inclusive", 0xF06BE),
    ("md_all_inclusive_box", 0xF188D),
    ("md_all_inclusive_box_outline", 0xF188E),
    ("md_allergy", 0xF1258),
    ("md_alpha", 0xF002B),
    ("md_alpha_a", 0xF0AEE),
    ("md_alpha_a_box", 0xF0B08),
    ("md_alpha_a_box_outline", 0xF0BEB),
    ("md_alpha_a_circle", 0xF0BEC),
    ("md_alpha_a_circle_outline", 0xF0BED),
    ("md_alpha_b", 0xF0AEF),
    ("md_alpha_b_box", 0xF0B09),
    ("md_alpha_b_box_outline", 0xF0BEE),
    ("md_alpha_b_circle", 0xF0BEF),
    ("md_alpha_b_circle_outline", 0xF0BF0),
    ("md_alpha_c", 0xF0AF0),
    ("md_alpha_c_box", 0xF0B0A),
    ("md_alpha_c_box_outline", 0xF0BF1),
    ("md_alpha_c_circle", 0xF0BF2),
    ("md_alpha_c_circle_outline", 0xF0BF3),
    ("md_alpha_d", 0xF0AF1),
    ("md_alpha_d_box", 0xF0B0B),
    ("md_alpha_d_box_outline", 0xF0BF4),
    ("md_alpha_d_circle", 0xF0BF5),
    ("md_alpha_d_circle_outline", 0xF0BF6),
    ("md_alpha_e", 0xF0AF2),
    ("md_alpha_e_box", 0xF0B0C),
    ("md_alpha_e_box_outline", 0xF0BF7),
    ("md_alpha_e_circle", 0xF0BF8),
    ("md_alpha_e_circle_outline", 0xF0BF9),
    ("md_alpha_f", 0xF0AF3),
    ("md_alpha_f_box", 0xF0B0D),
    ("md_alpha_f_box_outline", 0xF0BFA),
    ("md_alpha_f_circle", 0xF0BFB),
    ("md_alpha_f_circle_outline", 0xF0BFC),
    ("md_alpha_g", 0xF0AF4),
    ("md_alpha_g_box", 0xF0B0E),
    ("md_alpha_g_box_outline", 0xF0BFD),
    ("md_alpha_g_circle", 0xF0BFE),
    ("md_alpha_g_circle_outline", 0xF0BFF),
    ("md_alpha_h", 0xF0AF5),
    ("md_alpha_h_box", 0xF0B0F),
    ("md_alpha_h_box_outline", 0xF0C00),
    ("md_alpha_h_circle", 0xF0C01),
    ("md_alpha_h_circle_outline", 0xF0C02),
    ("md_alpha_i", 0xF0AF6),
    ("md_alpha_i_box", 0xF0B10),
    ("md_alpha_i_box_outline", 0xF0C03),
    ("md_alpha_i_circle", 0xF0C04),
    ("md_alpha_i_circle_outline", 0xF0C05),
    ("md_alpha_j", 0xF0AF7),
    ("md_alpha_j_box", 0xF0B11),
    ("md_alpha_j_box_outline", 0xF0C06),
    ("md_alpha_j_circle", 0xF0C07),
    ("md_alpha_j_circle_outline", 0xF0C08),
    ("md_alpha_k", 0xF0AF8),
    ("md_alpha_k_box", 0xF0B12),
    ("md_alpha_k_box_outline", 0xF0C09),
    ("md_alpha_k_circle", 0xF0C0A),
    ("md_alpha_k_circle_outline", 0xF0C0B),
    ("md_alpha_l", 0xF0AF9),
    ("md_alpha_l_box", 0xF0B13),
    ("md_alpha_l_box_outline", 0xF0C0C),
    ("md_alpha_l_circle", 0xF0C0D),
    ("md_alpha_l_circle_outline", 0xF0C0E),
    ("md_alpha_m", 0xF0AFA),
    ("md_alpha_m_box", 0xF0B14),
    ("md_alpha_m_box_outline", 0xF0C0F),
    ("md_alpha_m_circle", 0xF0C10),
    ("md_alpha_m_circle_outline", 0xF0C11),
    ("md_alpha_n", 0xF0AFB),
    ("md_alpha_n_box", 0xF0B15),
    ("md_alpha_n_box_outline", 0xF0C12),
    ("md_alpha_n_circle", 0xF0C13),
    ("md_alpha_n_circle_outline", 0xF0C14),
    ("md_alpha_o", 0xF0AFC),
    ("md_alpha_o_box", 0xF0B16),
    ("md_alpha_o_box_outline", 0xF0C15),
    ("md_alpha_o_circle", 0xF0C16),
    ("md_alpha_o_circle_outline", 0xF0C17),
    ("md_alpha_p", 0xF0AFD),
    ("md_alpha_p_box", 0xF0B17),
    ("md_alpha_p_box_outline", 0xF0C18),
    ("md_alpha_p_circle", 0xF0C19),
    ("md_alpha_p_circle_outline", 0xF0C1A),
    ("md_alpha_q", 0xF0AFE),
    ("md_alpha_q_box", 0xF0B18),
    ("md_alpha_q_box_outline", 0xF0C1B),
    ("md_alpha_q_circle", 0xF0C1C),
    ("md_alpha_q_circle_outline", 0xF0C1D),
    ("md_alpha_r", 0xF0AFF),
    ("md_alpha_r_box", 0xF0B19),
    ("md_alpha_r_box_outline", 0xF0C1E),
    ("md_alpha_r_circle", 0xF0C1F),
    ("md_alpha_r_circle_outline", 0xF0C20),
    ("md_alpha_s", 0xF0B00),
    ("md_alpha_s_box", 0xF0B1A),
    ("md_alpha_s_box_outline", 0xF0C21),
    ("md_alpha_s_circle", 0xF0C22),
    ("md_alpha_s_circle_outline", 0xF0C23),
    ("md_alpha_t", 0xF0B01),
    ("md_alpha_t_box", 0xF0B1B),
    ("md_alpha_t_box_outline", 0xF0C24),
    ("md_alpha_t_circle", 0xF0C25),
    ("md_alpha_t_circle_outline", 0xF0C26),
    ("md_alpha_u", 0xF0B02),
    ("md_alpha_u_box", 0xF0B1C),
    ("md_alpha_u_box_outline", 0xF0C27),
    ("md_alpha_u_circle", 0xF0C28),
    ("md_alpha_u_circle_outline", 0xF0C29),
    ("md_alpha_v", 0xF0B03),
    ("md_alpha_v_box", 0xF0B1D),
    ("md_alpha_v_box_outline", 0xF0C2A),
    ("md_alpha_v_circle", 0xF0C2B),
    ("md_alpha_v_circle_outline", 0xF0C2C),
    ("md_alpha_w", 0xF0B04),
    ("md_alpha_w_box", 0xF0B1E),
    ("md_alpha_w_box_outline", 0xF0C2D),
    ("md_alpha_w_circle", 0xF0C2E),
    ("md_alpha_w_circle_outline", 0xF0C2F),
    ("md_alpha_x", 0xF0B05),
    ("md_alpha_x_box", 0xF0B1F),
    ("md_alpha_x_box_outline", 0xF0C30),
    ("md_alpha_x_circle", 0xF0C31),
    ("md_alpha_x_circle_outline", 0xF0C32),
    ("md_alpha_y", 0xF0B06),
    ("md_alpha_y_box", 0xF0B20),
    ("md_alpha_y_box_outline", 0xF0C33),
    ("md_alpha_y_circle", 0xF0C34),
    ("md_alpha_y_circle_outline", 0xF0C35),
    ("md_alpha_z", 0xF0B07),
    ("md_alpha_z_box", 0xF0B21),
    ("md_alpha_z_box_outline", 0xF0C36),
    ("md_alpha_z_circle", 0xF0C37),
    ("md_alpha_z_circle_outline", 0xF0C38),
    ("md_alphabet_aurebesh", 0xF132C),
    ("md_alphabet_cyrillic", 0xF132D),
    ("md_alphabet_greek", 0xF132E),
    ("md_alphabet_latin", 0xF132F),
    ("md_alphabet_piqad", 0xF1330),
    ("md_alphabet_tengwar", 0xF1337),
    ("md_alphabetical", 0xF002C),
    ("md_alphabetical_off", 0xF100C),
    ("md_alphabetical_variant", 0xF100D),
    ("md_alphabetical_variant_off", 0xF100E),
    ("md_altimeter", 0xF05D7),
    ("md_ambulance", 0xF002F),
    ("md_ammunition", 0xF0CE8),
    ("md_ampersand", 0xF0A8D),
    ("md_amplifier", 0xF0030),
    ("md_amplifier_off", 0xF11B5),
    ("md_anchor", 0xF0031),
    ("md_android", 0xF0032),
    ("md_android_messages", 0xF0D45),
    ("md_android_studio", 0xF0034),
    ("md_angle_acute", 0xF0937),
    ("md_angle_obtuse", 0xF0938),
    ("md_angle_right", 0xF0939),
    ("md_angular", 0xF06B2),
    ("md_angularjs", 0xF06BF),
    ("md_animation", 0xF05D8),
    ("md_animation_outline", 0xF0A8F),
    ("md_animation_play", 0xF093A),
    ("md_animation_play_outline", 0xF0A90),
    ("md_ansible", 0xF109A),
    ("md_antenna", 0xF1119),
    ("md_anvil", 0xF089B),
    ("md_apache_kafka", 0xF100F),
    ("md_api", 0xF109B),
    ("md_api_off", 0xF1257),
    ("md_apple", 0xF0035),
    ("md_apple_finder", 0xF0036),
    ("md_apple_icloud", 0xF0038),
    ("md_apple_ios", 0xF0037),
    ("md_apple_keyboard_caps", 0xF0632),
    ("md_apple_keyboard_command", 0xF0633),
    ("md_apple_keyboard_control", 0xF0634),
    ("md_apple_keyboard_option", 0xF0635),
    ("md_apple_keyboard_shift", 0xF0636),
    ("md_apple_safari", 0xF0039),
    ("md_application", 0xF08C6),
    ("md_application_array", 0xF10F5),
    ("md_application_array_outline", 0xF10F6),
    ("md_application_braces", 0xF10F7),
    ("md_application_braces_outline", 0xF10F8),
    ("md_application_brackets", 0xF0C8B),
    ("md_application_brackets_outline", 0xF0C8C),
    ("md_application_cog", 0xF0675),
    ("md_application_cog_outline", 0xF1577),
    ("md_application_edit", 0xF00AE),
    ("md_application_edit_outline", 0xF0619),
    ("md_application_export", 0xF0DAD),
    ("md_application_import", 0xF0DAE),
    ("md_application_outline", 0xF0614),
    ("md_application_parentheses", 0xF10F9),
    ("md_application_parentheses_outline", 0xF10FA),
    ("md_application_settings", 0xF0B60),
    ("md_application_settings_outline", 0xF1555),
    ("md_application_variable", 0xF10FB),
    ("md_application_variable_outline", 0xF10FC),
    ("md_approximately_equal", 0xF0F9E),
    ("md_approximately_equal_box", 0xF0F9F),
    ("md_apps", 0xF003B),
    ("md_apps_box", 0xF0D46),
    ("md_arch", 0xF08C7),
    ("md_archive", 0xF003C),
    ("md_archive_alert", 0xF14FD),
    ("md_archive_alert_outline", 0xF14FE),
    ("md_archive_arrow_down", 0xF1259),
    ("md_archive_arrow_down_outline", 0xF125A),
    ("md_archive_arrow_up", 0xF125B),
    ("md_archive_arrow_up_outline", 0xF125C),
    ("md_archive_cancel", 0xF174B),
    ("md_archive_cancel_outline", 0xF174C),
    ("md_archive_check", 0xF174D),
    ("md_archive_check_outline", 0xF174E),
    ("md_archive_clock", 0xF174F),
    ("md_archive_clock_outline", 0xF1750),
    ("md_archive_cog", 0xF1751),
    ("md_archive_cog_outline", 0xF1752),
    ("md_archive_edit", 0xF1753),
    ("md_archive_edit_outline", 0xF1754),
    ("md_archive_eye", 0xF1755),
    ("md_archive_eye_outline", 0xF1756),
    ("md_archive_lock", 0xF1757),
    ("md_archive_lock_open", 0xF1758),
    ("md_archive_lock_open_outline", 0xF1759),
    ("md_archive_lock_outline", 0xF175A),
    ("md_archive_marker", 0xF175B),
    ("md_archive_marker_outline", 0xF175C),
    ("md_archive_minus", 0xF175D),
    ("md_archive_minus_outline", 0xF175E),
    ("md_archive_music", 0xF175F),
    ("md_archive_music_outline", 0xF1760),
    ("md_archive_off", 0xF1761),
    ("md_archive_off_outline", 0xF1762),
    ("md_archive_outline", 0xF120E),
    ("md_archive_plus", 0xF1763),
    ("md_archive_plus_outline", 0xF1764),
    ("md_archive_refresh", 0xF1765),
    ("md_archive_refresh_outline", 0xF1766),
    ("md_archive_remove", 0xF1767),
    ("md_archive_remove_outline", 0xF1768),
    ("md_archive_search", 0xF1769),
    ("md_archive_search_outline", 0xF176A),
    ("md_archive_settings", 0xF176B),
    ("md_archive_settings_outline", 0xF176C),
    ("md_archive_star", 0xF176D),
    ("md_archive_star_outline", 0xF176E),
    ("md_archive_sync", 0xF176F),
    ("md_archive_sync_outline", 0xF1770),
    ("md_arm_flex", 0xF0FD7),
    ("md_arm_flex_outline", 0xF0FD6),
    ("md_arrange_bring_forward", 0xF003D),
    ("md_arrange_bring_to_front", 0xF003E),
    ("md_arrange_send_backward", 0xF003F),
    ("md_arrange_send_to_back", 0xF0040),
    ("md_arrow_all", 0xF0041),
    ("md_arrow_bottom_left", 0xF0042),
    ("md_arrow_bottom_left_bold_box", 0xF1964),
    ("md_arrow_bottom_left_bold_box_outline", 0xF1965),
    ("md_arrow_bottom_left_bold_outline", 0xF09B7),
    ("md_arrow_bottom_left_thick", 0xF09B8),
    ("md_arrow_bottom_left_thin", 0xF19B6),
    ("md_arrow_bottom_left_thin_circle_outline", 0xF1596),
    ("md_arrow_bottom_right", 0xF0043),
    ("md_arrow_bottom_right_bold_box", 0xF1966),
    ("md_arrow_bottom_right_bold_box_outline", 0xF1967),
    ("md_arrow_bottom_right_bold_outline", 0xF09B9),
    ("md_arrow_bottom_right_thick", 0xF09BA),
    ("md_arrow_bottom_right_thin", 0xF19B7),
    ("md_arrow_bottom_right_thin_circle_outline", 0xF1595),
    ("md_arrow_collapse", 0xF0615),
    ("md_arrow_collapse_all", 0xF0044),
    ("md_arrow_collapse_down", 0xF0792),
    ("md_arrow_collapse_horizontal", 0xF084C),
    ("md_arrow_collapse_left", 0xF0793),
    ("md_arrow_collapse_right", 0xF0794),
    ("md_arrow_collapse_up", 0xF0795),
    ("md_arrow_collapse_vertical", 0xF084D),
    ("md_arrow_decision", 0xF09BB),
    ("md_arrow_decision_auto", 0xF09BC),
    ("md_arrow_decision_auto_outline", 0xF09BD),
    ("md_arrow_decision_outline", 0xF09BE),
    ("md_arrow_down", 0xF0045),
    ("md_arrow_down_bold", 0xF072E),
    ("md_arrow_down_bold_box", 0xF072F),
    ("md_arrow_down_bold_box_outline", 0xF0730),
    ("md_arrow_down_bold_circle", 0xF0047),
    ("md_arrow_down_bold_circle_outline", 0xF0048),
    ("md_arrow_down_bold_hexagon_outline", 0xF0049),
    ("md_arrow_down_bold_outline", 0xF09BF),
    ("md_arrow_down_box", 0xF06C0),
    ("md_arrow_down_circle", 0xF0CDB),
    ("md_arrow_down_circle_outline", 0xF0CDC),
    ("md_arrow_down_drop_circle", 0xF004A),
    ("md_arrow_down_drop_circle_outline", 0xF004B),
    ("md_arrow_down_left", 0xF17A1),
    ("md_arrow_down_left_bold", 0xF17A2),
    ("md_arrow_down_right", 0xF17A3),
    ("md_arrow_down_right_bold", 0xF17A4),
    ("md_arrow_down_thick", 0xF0046),
    ("md_arrow_down_thin", 0xF19B3),
    ("md_arrow_down_thin_circle_outline", 0xF1599),
    ("md_arrow_expand", 0xF0616),
    ("md_arrow_expand_all", 0xF004C),
    ("md_arrow_expand_down", 0xF0796),
    ("md_arrow_expand_horizontal", 0xF084E),
    ("md_arrow_expand_left", 0xF0797),
    ("md_arrow_expand_right", 0xF0798),
    ("md_arrow_expand_up", 0xF0799),
    ("md_arrow_expand_vertical", 0xF084F),
    ("md_arrow_horizontal_lock", 0xF115B),
    ("md_arrow_left", 0xF004D),
    ("md_arrow_left_bold", 0xF0731),
    ("md_arrow_left_bold_box", 0xF0732),
    ("md_arrow_left_bold_box_outline", 0xF0733),
    ("md_arrow_left_bold_circle", 0xF004F),
    ("md_arrow_left_bold_circle_outline", 0xF0050),
    ("md_arrow_left_bold_hexagon_outline", 0xF0051),
    ("md_arrow_left_bold_outline", 0xF09C0),
    ("md_arrow_left_bottom", 0xF17A5),
    ("md_arrow_left_bottom_bold", 0xF17A6),
    ("md_arrow_left_box", 0xF06C1),
    ("md_arrow_left_circle", 0xF0CDD),
    ("md_arrow_left_circle_outline", 0xF0CDE),
    ("md_arrow_left_drop_circle", 0xF0052),
    ("md_arrow_left_drop_circle_outline", 0xF0053),
    ("md_arrow_left_right", 0xF0E73),
    ("md_arrow_left_right_bold", 0xF0E74),
    ("md_arrow_left_right_bold_outline", 0xF09C1),
    ("md_arrow_left_thick", 0xF004E),
    ("md_arrow_left_thin", 0xF19B1),
    ("md_arrow_left_thin_circle_outline", 0xF159A),
    ("md_arrow_left_top", 0xF17A7),
    ("md_arrow_left_top_bold", 0xF17A8),
    ("md_arrow_projectile", 0xF1840),
    ("md_arrow_projectile_multiple", 0xF183F),
    ("md_arrow_right", 0xF0054),
    ("md_arrow_right_bold", 0xF0734),
    ("md_arrow_right_bold_box", 0xF0735),
    ("md_arrow_right_bold_box_outline", 0xF0736),
    ("md_arrow_right_bold_circle", 0xF0056),
    ("md_arrow_right_bold_circle_outline", 0xF0057),
    ("md_arrow_right_bold_hexagon_outline", 0xF0058),
    ("md_arrow_right_bold_outline", 0xF09C2),
    ("md_arrow_right_bottom", 0xF17A9),
    ("md_arrow_right_bottom_bold", 0xF17AA),
    ("md_arrow_right_box", 0xF06C2),
    ("md_arrow_right_circle", 0xF0CDF),
    ("md_arrow_right_circle_outline", 0xF0CE0),
    ("md_arrow_right_drop_circle", 0xF0059),
    ("md_arrow_right_drop_circle_outline", 0xF005A),
    ("md_arrow_right_thick", 0xF0055),
    ("md_arrow_right_thin", 0xF19B0),
    ("md_arrow_right_thin_circle_outline", 0xF1598),
    ("md_arrow_right_top", 0xF17AB),
    ("md_arrow_right_top_bold", 0xF17AC),
    ("md_arrow_split_horizontal", 0xF093B),
    ("md_arrow_split_vertical", 0xF093C),
    ("md_arrow_top_left", 0xF005B),
    ("md_arrow_top_left_bold_box", 0xF1968),
    ("md_arrow_top_left_bold_box_outline", 0xF1969),
    ("md_arrow_top_left_bold_outline", 0xF09C3),
    ("md_arrow_top_left_bottom_right", 0xF0E75),
    ("md_arrow_top_left_bottom_right_bold", 0xF0E76),
    ("md_arrow_top_left_thick", 0xF09C4),
    ("md_arrow_top_left_thin", 0xF19B5),
    ("md_arrow_top_left_thin_circle_outline", 0xF1593),
    ("md_arrow_top_right", 0xF005C),
    ("md_arrow_top_right_bold_box", 0xF196A),
    ("md_arrow_top_right_bold_box_outline", 0xF196B),
    ("md_arrow_top_right_bold_outline", 0xF09C5),
    ("md_arrow_top_right_bottom_left", 0xF0E77),
    ("md_arrow_top_right_bottom_left_bold", 0xF0E78),
    ("md_arrow_top_right_thick", 0xF09C6),
    ("md_arrow_top_right_thin", 0xF19B4),
    ("md_arrow_top_right_thin_circle_outline", 0xF1594),
    ("md_arrow_u_down_left", 0xF17AD),
    ("md_arrow_u_down_left_bold", 0xF17AE),
    ("md_arrow_u_down_right", 0xF17AF),
    ("md_arrow_u_down_right_bold", 0xF17B0),
    ("md_arrow_u_left_bottom", 0xF17B1),
    ("md_arrow_u_left_bottom_bold", 0xF17B2),
    ("md_arrow_u_left_top", 0xF17B3),
    ("md_arrow_u_left_top_bold", 0xF17B4),
    ("md_arrow_u_right_bottom", 0xF17B5),
    ("md_arrow_u_right_bottom_bold", 0xF17B6),
    ("md_arrow_u_right_top", 0xF17B7),
    ("md_arrow_u_right_top_bold", 0xF17B8),
    ("md_arrow_u_up_left", 0xF17B9),
    ("md_arrow_u_up_left_bold", 0xF17BA),
    ("md_arrow_u_up_right", 0xF17BB),
    ("md_arrow_u_up_right_bold", 0xF17BC),
    ("md_arrow_up", 0xF005D),
    ("md_arrow_up_bold", 0xF0737),
    ("md_arrow_up_bold_box", 0xF0738),
    ("md_arrow_up_bold_box_outline", 0xF0739),
    ("md_arrow_up_bold_circle", 0xF005F),
    ("md_arrow_up_bold_circle_outline", 0xF0060),
    ("md_arrow_up_bold_hexagon_outline", 0xF0061),
    ("md_arrow_up_bold_outline", 0xF09C7),
    ("md_arrow_up_box", 0xF06C3),
    ("md_arrow_up_circle", 0xF0CE1),
    ("md_arrow_up_circle_outline", 0xF0CE2),
    ("md_arrow_up_down", 0xF0E79),
    ("md_arrow_up_down_bold", 0xF0E7A),
    ("md_arrow_up_down_bold_outline", 0xF09C8),
    ("md_arrow_up_drop_circle", 0xF0062),
    ("md_arrow_up_drop_circle_outline", 0xF0063),
    ("md_arrow_up_left", 0xF17BD),
    ("md_arrow_up_left_bold", 0xF17BE),
    ("md_arrow_up_right", 0xF17BF),
    ("md_arrow_up_right_bold", 0xF17C0),
    ("md_arrow_up_thick", 0xF005E),
    ("md_arrow_up_thin", 0xF19B2),
    ("md_arrow_up_thin_circle_outline", 0xF1597),
    ("md_arrow_vertical_lock", 0xF115C),
    ("md_artstation", 0xF0B5B),
    ("md_aspect_ratio", 0xF0A24),
    ("md_assistant", 0xF0064),
    ("md_asterisk", 0xF06C4),
    ("md_asterisk_circle_outline", 0xF1A27),
    ("md_at", 0xF0065),
    ("md_atlassian", 0xF0804),
    ("md_atm", 0xF0D47),
    ("md_atom", 0xF0768),
    ("md_atom_variant", 0xF0E7B),
    ("md_attachment", 0xF0066),
    ("md_attachment_check", 0xF1AC1),
    ("md_attachment_lock", 0xF19C4),
    ("md_attachment_minus", 0xF1AC2),
    ("md_attachment_off", 0xF1AC3),
    ("md_attachment_plus", 0xF1AC4),
    ("md_attachment_remove", 0xF1AC5),
    ("md_audio_input_rca", 0xF186B),
    ("md_audio_input_stereo_minijack", 0xF186C),
    ("md_audio_input_xlr", 0xF186D),
    ("md_audio_video", 0xF093D),
    ("md_audio_video_off", 0xF11B6),
    ("md_augmented_reality", 0xF0850),
    ("md_auto_download", 0xF137E),
    ("md_auto_fix", 0xF0068),
    ("md_auto_upload", 0xF0069),
    ("md_autorenew", 0xF006A),
    ("md_autorenew_off", 0xF19E7),
    ("md_av_timer", 0xF006B),
    ("md_aws", 0xF0E0F),
    ("md_axe", 0xF08C8),
    ("md_axe_battle", 0xF1842),
    ("md_axis", 0xF0D48),
    ("md_axis_arrow", 0xF0D49),
    ("md_axis_arrow_info", 0xF140E),
    ("md_axis_arrow_lock", 0xF0D4A),
    ("md_axis_lock", 0xF0D4B),
    ("md_axis_x_arrow", 0xF0D4C),
    ("md_axis_x_arrow_lock", 0xF0D4D),
    ("md_axis_x_rotate_clockwise", 0xF0D4E),
    ("md_axis_x_rotate_counterclockwise", 0xF0D4F),
    ("md_axis_x_y_arrow_lock", 0xF0D50),
    ("md_axis_y_arrow", 0xF0D51),
    ("md_axis_y_arrow_lock", 0xF0D52),
    ("md_axis_y_rotate_clockwise", 0xF0D53),
    ("md_axis_y_rotate_counterclockwise", 0xF0D54),
    ("md_axis_z_arrow", 0xF0D55),
    ("md_axis_z_arrow_lock", 0xF0D56),
    ("md_axis_z_rotate_clockwise", 0xF0D57),
    ("md_axis_z_rotate_counterclockwise", 0xF0D58),
    ("md_babel", 0xF0A25),
    ("md_baby", 0xF006C),
    ("md_baby_bottle", 0xF0F39),
    ("md_baby_bottle_outline", 0xF0F3A),
    ("md_baby_buggy", 0xF13E0),
    ("md_baby_carriage", 0xF068F),
    ("md_baby_carriage_off", 0xF0FA0),
    ("md_baby_face", 0xF0E7C),
    ("md_baby_face_outline", 0xF0E7D),
    ("md_backburger", 0xF006D),
    ("md_backspace", 0xF006E),
    ("md_backspace_outline", 0xF0B5C),
    ("md_backspace_reverse", 0xF0E7E),
    ("md_backspace_reverse_outline", 0xF0E7F),
    ("md_backup_restore", 0xF006F),
    ("md_bacteria", 0xF0ED5),
    ("md_bacteria_outline", 0xF0ED6),
    ("md_badge_account", 0xF0DA7),
    ("md_badge_account_alert", 0xF0DA8),
    ("md_badge_account_alert_outline", 0xF0DA9),
    ("md_badge_account_horizontal", 0xF0E0D),
    ("md_badge_account_horizontal_outline", 0xF0E0E),
    ("md_badge_account_outline", 0xF0DAA),
    ("md_badminton", 0xF0851),
    ("md_bag_carry_on", 0xF0F3B),
    ("md_bag_carry_on_check", 0xF0D65),
    ("md_bag_carry_on_off", 0xF0F3C),
    ("md_bag_checked", 0xF0F3D),
    ("md_bag_personal", 0xF0E10),
    ("md_bag_personal_off", 0xF0E11),
    ("md_bag_personal_off_outline", 0xF0E12),
    ("md_bag_personal_outline", 0xF0E13),
    ("md_bag_suitcase", 0xF158B),
    ("md_bag_suitcase_off", 0xF158D),
    ("md_bag_suitcase_off_outline", 0xF158E),
    ("md_bag_suitcase_outline", 0xF158C),
    ("md_baguette", 0xF0F3E),
    ("md_balcony", 0xF1817),
    ("md_balloon", 0xF0A26),
    ("md_ballot", 0xF09C9),
    ("md_ballot_outline", 0xF09CA),
    ("md_ballot_recount", 0xF0C39),
    ("md_ballot_recount_outline", 0xF0C3A),
    ("md_bandage", 0xF0DAF),
    ("md_bank", 0xF0070),
    ("md_bank_check", 0xF1655),
    ("md_bank_minus", 0xF0DB0),
    ("md_bank_off", 0xF1656),
    ("md_bank_off_outline", 0xF1657),
    ("md_bank_outline", 0xF0E80),
    ("md_bank_plus", 0xF0DB1),
    ("md_bank_remove", 0xF0DB2),
    ("md_bank_transfer", 0xF0A27),
    ("md_bank_transfer_in", 0xF0A28),
    ("md_bank_transfer_out", 0xF0A29),
    ("md_barcode", 0xF0071),
    ("md_barcode_off", 0xF1236),
    ("md_barcode_scan", 0xF0072),
    ("md_barley", 0xF0073),
    ("md_barley_off", 0xF0B5D),
    ("md_barn", 0xF0B5E),
    ("md_barrel", 0xF0074),
    ("md_barrel_outline", 0xF1A28),
    ("md_baseball", 0xF0852),
    ("md_baseball_bat", 0xF0853),
    ("md_baseball_diamond", 0xF15EC),
    ("md_baseball_diamond_outline", 0xF15ED),
    ("md_bash", 0xF1183),
    ("md_basket", 0xF0076),
    ("md_basket_check", 0xF18E5),
    ("md_basket_check_outline", 0xF18E6),
    ("md_basket_fill", 0xF0077),
    ("md_basket_minus", 0xF1523),
    ("md_basket_minus_outline", 0xF1524),
    ("md_basket_off", 0xF1525),
    ("md_basket_off_outline", 0xF1526),
    ("md_basket_outline", 0xF1181),
    ("md_basket_plus", 0xF1527),
    ("md_basket_plus_outline", 0xF1528),
    ("md_basket_remove", 0xF1529),
    ("md_basket_remove_outline", 0xF152A),
    ("md_basket_unfill", 0xF0078),
    ("md_basketball", 0xF0806),
    ("md_basketball_hoop", 0xF0C3B),
    ("md_basketball_hoop_outline", 0xF0C3C),
    ("md_bat", 0xF0B5F),
    ("md_bathtub", 0xF1818),
    ("md_bathtub_outline", 0xF1819),
    ("md_battery", 0xF0079),
    ("md_battery_10", 0xF007A),
    ("md_battery_10_bluetooth", 0xF093E),
    ("md_battery_20", 0xF007B),
    ("md_battery_20_bluetooth", 0xF093F),
    ("md_battery_30", 0xF007C),
    ("md_battery_30_bluetooth", 0xF0940),
    ("md_battery_40", 0xF007D),
    ("md_battery_40_bluetooth", 0xF0941),
    ("md_battery_50", 0xF007E),
    ("md_battery_50_bluetooth", 0xF0942),
    ("md_battery_60", 0xF007F),
    ("md_battery_60_bluetooth", 0xF0943),
    ("md_battery_70", 0xF0080),
    ("md_battery_70_bluetooth", 0xF0944),
    ("md_battery_80", 0xF0081),
    ("md_battery_80_bluetooth", 0xF0945),
    ("md_battery_90", 0xF0082),
    ("md_battery_90_bluetooth", 0xF0946),
    ("md_battery_alert", 0xF0083),
    ("md_battery_alert_bluetooth", 0xF0947),
    ("md_battery_alert_variant", 0xF10CC),
    ("md_battery_alert_variant_outline", 0xF10CD),
    ("md_battery_arrow_down", 0xF17DE),
    ("md_battery_arrow_down_outline", 0xF17DF),
    ("md_battery_arrow_up", 0xF17E0),
    ("md_battery_arrow_up_outline", 0xF17E1),
    ("md_battery_bluetooth", 0xF0948),
    ("md_battery_bluetooth_variant", 0xF0949),
    ("md_battery_charging", 0xF0084),
    ("md_battery_charging_10", 0xF089C),
    ("md_battery_charging_100", 0xF0085),
    ("md_battery_charging_20", 0xF0086),
    ("md_battery_charging_30", 0xF0087),
    ("md_battery_charging_40", 0xF0088),
    ("md_battery_charging_50", 0xF089D),
    ("md_battery_charging_60", 0xF0089),
    ("md_battery_charging_70", 0xF089E),
    ("md_battery_charging_80", 0xF008A),
    ("md_battery_charging_90", 0xF008B),
    ("md_battery_charging_high", 0xF12A6),
    ("md_battery_charging_low", 0xF12A4),
    ("md_battery_charging_medium", 0xF12A5),
    ("md_battery_charging_outline", 0xF089F),
    ("md_battery_charging_wireless", 0xF0807),
    ("md_battery_charging_wireless_10", 0xF0808),
    ("md_battery_charging_wireless_20", 0xF0809),
    ("md_battery_charging_wireless_30", 0xF080A),
    ("md_battery_charging_wireless_40", 0xF080B),
    ("md_battery_charging_wireless_50", 0xF080C),
    ("md_battery_charging_wireless_60", 0xF080D),
    ("md_battery_charging_wireless_70", 0xF080E),
    ("md_battery_charging_wireless_80", 0xF080F),
    ("md_battery_charging_wireless_90", 0xF0810),
    ("md_battery_charging_wireless_alert", 0xF0811),
    ("md_battery_charging_wireless_outline", 0xF0812),
    ("md_battery_check", 0xF17E2),
    ("md_battery_check_outline", 0xF17E3),
    ("md_battery_clock", 0xF19E5),
    ("md_battery_clock_outline", 0xF19E6),
    ("md_battery_heart", 0xF120F),
    ("md_battery_heart_outline", 0xF1210),
    ("md_battery_heart_variant", 0xF1211),
    ("md_battery_high", 0xF12A3),
    ("md_battery_lock", 0xF179C),
    ("md_battery_lock_open", 0xF179D),
    ("md_battery_low", 0xF12A1),
    ("md_battery_medium", 0xF12A2),
    ("md_battery_minus", 0xF17E4),
    ("md_battery_minus_outline", 0xF17E5),
    ("md_battery_minus_variant", 0xF008C),
    ("md_battery_negative", 0xF008D),
    ("md_battery_off", 0xF125D),
    ("md_battery_off_outline", 0xF125E),
    ("md_battery_outline", 0xF008E),
    ("md_battery_plus", 0xF17E6),
    ("md_battery_plus_outline", 0xF17E7),
    ("md_battery_plus_variant", 0xF008F),
    ("md_battery_positive", 0xF0090),
    ("md_battery_remove", 0xF17E8),
    ("md_battery_remove_outline", 0xF17E9),
    ("md_battery_sync", 0xF1834),
    ("md_battery_sync_outline", 0xF1835),
    ("md_battery_unknown", 0xF0091),
    ("md_battery_unknown_bluetooth", 0xF094A),
    ("md_beach", 0xF0092),
    ("md_beaker", 0xF0CEA),
    ("md_beaker_alert", 0xF1229),
    ("md_beaker_alert_outline", 0xF122A),
    ("md_beaker_check", 0xF122B),
    ("md_beaker_check_outline", 0xF122C),
    ("md_beaker_minus", 0xF122D),
    ("md_beaker_minus_outline", 0xF122E),
    ("md_beaker_outline", 0xF0690),
    ("md_beaker_plus", 0xF122F),
    ("md_beaker_plus_outline", 0xF1230),
    ("md_beaker_question", 0xF1231),
    ("md_beaker_question_outline", 0xF1232),
    ("md_beaker_remove", 0xF1233),
    ("md_beaker_remove_outline", 0xF1234),
    ("md_bed", 0xF02E3),
    ("md_bed_double", 0xF0FD4),
    ("md_bed_double_outline", 0xF0FD3),
    ("md_bed_empty", 0xF08A0),
    ("md_bed_king", 0xF0FD2),
    ("md_bed_king_outline", 0xF0FD1),
    ("md_bed_outline", 0xF0099),
    ("md_bed_queen", 0xF0FD0),
    ("md_bed_queen_outline", 0xF0FDB),
    ("md_bed_single", 0xF106D),
    ("md_bed_single_outline", 0xF106E),
    ("md_bee", 0xF0FA1),
    ("md_bee_flower", 0xF0FA2),
    ("md_beehive_off_outline", 0xF13ED),
    ("md_beehive_outline", 0xF10CE),
    ("md_beekeeper", 0xF14E2),
    ("md_beer", 0xF0098),
    ("md_beer_outline", 0xF130C),
    ("md_bell", 0xF009A),
    ("md_bell_alert", 0xF0D59),
    ("md_bell_alert_outline", 0xF0E81),
    ("md_bell_badge", 0xF116B),
    ("md_bell_badge_outline", 0xF0178),
    ("md_bell_cancel", 0xF13E7),
    ("md_bell_cancel_outline", 0xF13E8),
    ("md_bell_check", 0xF11E5),
    ("md_bell_check_outline", 0xF11E6),
    ("md_bell_circle", 0xF0D5A),
    ("md_bell_circle_outline", 0xF0D5B),
    ("md_bell_cog", 0xF1A29),
    ("md_bell_cog_outline", 0xF1A2A),
    ("md_bell_minus", 0xF13E9),
    ("md_bell_minus_outline", 0xF13EA),
    ("md_bell_off", 0xF009B),
    ("md_bell_off_outline", 0xF0A91),
    ("md_bell_outline", 0xF009C),
    ("md_bell_plus", 0xF009D),
    ("md_bell_plus_outline", 0xF0A92),
    ("md_bell_remove", 0xF13EB),
    ("md_bell_remove_outline", 0xF13EC),
    ("md_bell_ring", 0xF009E),
    ("md_bell_ring_outline", 0xF009F),
    ("md_bell_sleep", 0xF00A0),
    ("md_bell_sleep_outline", 0xF0A93),
    ("md_beta", 0xF00A1),
    ("md_betamax", 0xF09CB),
    ("md_biathlon", 0xF0E14),
    ("md_bicycle", 0xF109C),
    ("md_bicycle_basket", 0xF1235),
    ("md_bicycle_cargo", 0xF189C),
    ("md_bicycle_electric", 0xF15B4),
    ("md_bicycle_penny_farthing", 0xF15E9),
    ("md_bike", 0xF00A3),
    ("md_bike_fast", 0xF111F),
    ("md_billboard", 0xF1010),
    ("md_billiards", 0xF0B61),
    ("md_billiards_rack", 0xF0B62),
    ("md_binoculars", 0xF00A5),
    ("md_bio", 0xF00A6),
    ("md_biohazard", 0xF00A7),
    ("md_bird", 0xF15C6),
    ("md_bitbucket", 0xF00A8),
    ("md_bitcoin", 0xF0813),
    ("md_black_mesa", 0xF00A9),
    ("md_blender", 0xF0CEB),
    ("md_blender_outline", 0xF181A),
    ("md_blender_software", 0xF00AB),
    ("md_blinds", 0xF00AC),
    ("md_blinds_horizontal", 0xF1A2B),
    ("md_blinds_horizontal_closed", 0xF1A2C),
    ("md_blinds_open", 0xF1011),
    ("md_blinds_vertical", 0xF1A2D),
    ("md_blinds_vertical_closed", 0xF1A2E),
    ("md_block_helper", 0xF00AD),
    ("md_blood_bag", 0xF0CEC),
    ("md_bluetooth", 0xF00AF),
    ("md_bluetooth_audio", 0xF00B0),
    ("md_bluetooth_connect", 0xF00B1),
    ("md_bluetooth_off", 0xF00B2),
    ("md_bluetooth_settings", 0xF00B3),
    ("md_bluetooth_transfer", 0xF00B4),
    ("md_blur", 0xF00B5),
    ("md_blur_linear", 0xF00B6),
    ("md_blur_off", 0xF00B7),
    ("md_blur_radial", 0xF00B8),
    ("md_bolt", 0xF0DB3),
    ("md_bomb", 0xF0691),
    ("md_bomb_off", 0xF06C5),
    ("md_bone", 0xF00B9),
    ("md_bone_off", 0xF19E0),
    ("md_book", 0xF00BA),
    ("md_book_account", 0xF13AD),
    ("md_book_account_outline", 0xF13AE),
    ("md_book_alert", 0xF167C),
    ("md_book_alert_outline", 0xF167D),
    ("md_book_alphabet", 0xF061D),
    ("md_book_arrow_down", 0xF167E),
    ("md_book_arrow_down_outline", 0xF167F),
    ("md_book_arrow_left", 0xF1680),
    ("md_book_arrow_left_outline", 0xF1681),
    ("md_book_arrow_right", 0xF1682),
    ("md_book_arrow_right_outline", 0xF1683),
    ("md_book_arrow_up", 0xF1684),
    ("md_book_arrow_up_outline", 0xF1685),
    ("md_book_cancel", 0xF1686),
    ("md_book_cancel_outline", 0xF1687),
    ("md_book_check", 0xF14F3),
    ("md_book_check_outline", 0xF14F4),
    ("md_book_clock", 0xF1688),
    ("md_book_clock_outline", 0xF1689),
    ("md_book_cog", 0xF168A),
    ("md_book_cog_outline", 0xF168B),
    ("md_book_cross", 0xF00A2),
    ("md_book_edit", 0xF168C),
    ("md_book_edit_outline", 0xF168D),
    ("md_book_education", 0xF16C9),
    ("md_book_education_outline", 0xF16CA),
    ("md_book_heart", 0xF1A1D),
    ("md_book_heart_outline", 0xF1A1E),
    ("md_book_information_variant", 0xF106F),
    ("md_book_lock", 0xF079A),
    ("md_book_lock_open", 0xF079B),
    ("md_book_lock_open_outline", 0xF168E),
    ("md_book_lock_outline", 0xF168F),
    ("md_book_marker", 0xF1690),
    ("md_book_marker_outline", 0xF1691),
    ("md_book_minus", 0xF05D9),
    ("md_book_minus_multiple", 0xF0A94),
    ("md_book_minus_multiple_outline", 0xF090B),
    ("md_book_minus_outline", 0xF1692),
    ("md_book_multiple", 0xF00BB),
    ("md_book_multiple_outline", 0xF0436),
    ("md_book_music", 0xF0067),
    ("md_book_music_outline", 0xF1693),
    ("md_book_off", 0xF1694),
    ("md_book_off_outline", 0xF1695),
    ("md_book_open", 0xF00BD),
    ("md_book_open_blank_variant", 0xF00BE),
    ("md_book_open_outline", 0xF0B63),
    ("md_book_open_page_variant", 0xF05DA),
    ("md_book_open_page_variant_outline", 0xF15D6),
    ("md_book_open_variant", 0xF14F7),
    ("md_book_outline", 0xF0B64),
    ("md_book_play", 0xF0E82),
    ("md_book_play_outline", 0xF0E83),
    ("md_book_plus", 0xF05DB),
    ("md_book_plus_multiple", 0xF0A95),
    ("md_book_plus_multiple_outline", 0xF0ADE),
    ("md_book_plus_outline", 0xF1696),
    ("md_book_refresh", 0xF1697),
    ("md_book_refresh_outline", 0xF1698),
    ("md_book_remove", 0xF0A97),
    ("md_book_remove_multiple", 0xF0A96),
    ("md_book_remove_multiple_outline", 0xF04CA),
    ("md_book_remove_outline", 0xF1699),
    ("md_book_search", 0xF0E84),
    ("md_book_search_outline", 0xF0E85),
    ("md_book_settings", 0xF169A),
    ("md_book_settings_outline", 0xF169B),
    ("md_book_sync", 0xF169C),
    ("md_book_sync_outline", 0xF16C8),
    ("md_book_variant", 0xF00BF),
    ("md_book_variant_multiple", 0xF00BC),
    ("md_bookmark", 0xF00C0),
    ("md_bookmark_box_multiple", 0xF196C),
    ("md_bookmark_box_multiple_outline", 0xF196D),
    ("md_bookmark_check", 0xF00C1),
    ("md_bookmark_check_outline", 0xF137B),
    ("md_bookmark_minus", 0xF09CC),
    ("md_bookmark_minus_outline", 0xF09CD),
    ("md_bookmark_multiple", 0xF0E15),
    ("md_bookmark_multiple_outline", 0xF0E16),
    ("md_bookmark_music", 0xF00C2),
    ("md_bookmark_music_outline", 0xF1379),
    ("md_bookmark_off", 0xF09CE),
    ("md_bookmark_off_outline", 0xF09CF),
    ("md_bookmark_outline", 0xF00C3),
    ("md_bookmark_plus", 0xF00C5),
    ("md_bookmark_plus_outline", 0xF00C4),
    ("md_bookmark_remove", 0xF00C6),
    ("md_bookmark_remove_outline", 0xF137A),
    ("md_bookshelf", 0xF125F),
    ("md_boom_gate", 0xF0E86),
    ("md_boom_gate_alert", 0xF0E87),
    ("md_boom_gate_alert_outline", 0xF0E88),
    ("md_boom_gate_arrow_down", 0xF0E89),
    ("md_boom_gate_arrow_down_outline", 0xF0E8A),
    ("md_boom_gate_arrow_up", 0xF0E8C),
    ("md_boom_gate_arrow_up_outline", 0xF0E8D),
    ("md_boom_gate_outline", 0xF0E8B),
    ("md_boom_gate_up", 0xF17F9),
    ("md_boom_gate_up_outline", 0xF17FA),
    ("md_boombox", 0xF05DC),
    ("md_boomerang", 0xF10CF),
    ("md_bootstrap", 0xF06C6),
    ("md_border_all", 0xF00C7),
    ("md_border_all_variant", 0xF08A1),
    ("md_border_bottom", 0xF00C8),
    ("md_border_bottom_variant", 0xF08A2),
    ("md_border_color", 0xF00C9),
    ("md_border_horizontal", 0xF00CA),
    ("md_border_inside", 0xF00CB),
    ("md_border_left", 0xF00CC),
    ("md_border_left_variant", 0xF08A3),
    ("md_border_none", 0xF00CD),
    ("md_border_none_variant", 0xF08A4),
    ("md_border_outside", 0xF00CE),
    ("md_border_right", 0xF00CF),
    ("md_border_right_variant", 0xF08A5),
    ("md_border_style", 0xF00D0),
    ("md_border_top", 0xF00D1),
    ("md_border_top_variant", 0xF08A6),
    ("md_border_vertical", 0xF00D2),
    ("md_bottle_soda", 0xF1070),
    ("md_bottle_soda_classic", 0xF1071),
    ("md_bottle_soda_classic_outline", 0xF1363),
    ("md_bottle_soda_outline", 0xF1072),
    ("md_bottle_tonic", 0xF112E),
    ("md_bottle_tonic_outline", 0xF112F),
    ("md_bottle_tonic_plus", 0xF1130),
    ("md_bottle_tonic_plus_outline", 0xF1131),
    ("md_bottle_tonic_skull", 0xF1132),
    ("md_bottle_tonic_skull_outline", 0xF1133),
    ("md_bottle_wine", 0xF0854),
    ("md_bottle_wine_outline", 0xF1310),
    ("md_bow_arrow", 0xF1841),
    ("md_bow_tie", 0xF0678),
    ("md_bowl", 0xF028E),
    ("md_bowl_mix", 0xF0617),
    ("md_bowl_mix_outline", 0xF02E4),
    ("md_bowl_outline", 0xF02A9),
    ("md_bowling", 0xF00D3),
    ("md_box", 0xF00D4),
    ("md_box_cutter", 0xF00D5),
    ("md_box_cutter_off", 0xF0B4A),
    ("md_box_shadow", 0xF0637),
    ("md_boxing_glove", 0xF0B65),
    ("md_braille", 0xF09D0),
    ("md_brain", 0xF09D1),
    ("md_bread_slice", 0xF0CEE),
    ("md_bread_slice_outline", 0xF0CEF),
    ("md_bridge", 0xF0618),
    ("md_briefcase", 0xF00D6),
    ("md_briefcase_account", 0xF0CF0),
    ("md_briefcase_account_outline", 0xF0CF1),
    ("md_briefcase_arrow_left_right", 0xF1A8D),
    ("md_briefcase_arrow_left_right_outline", 0xF1A8E),
    ("md_briefcase_arrow_up_down", 0xF1A8F),
    ("md_briefcase_arrow_up_down_outline", 0xF1A90),
    ("md_briefcase_check", 0xF00D7),
    ("md_briefcase_check_outline", 0xF131E),
    ("md_briefcase_clock", 0xF10D0),
    ("md_briefcase_clock_outline", 0xF10D1),
    ("md_briefcase_download", 0xF00D8),
    ("md_briefcase_download_outline", 0xF0C3D),
    ("md_briefcase_edit", 0xF0A98),
    ("md_briefcase_edit_outline", 0xF0C3E),
    ("md_briefcase_eye", 0xF17D9),
    ("md_briefcase_eye_outline", 0xF17DA),
    ("md_briefcase_minus", 0xF0A2A),
    ("md_briefcase_minus_outline", 0xF0C3F),
    ("md_briefcase_off", 0xF1658),
    ("md_briefcase_off_outline", 0xF1659),
    ("md_briefcase_outline", 0xF0814),
    ("md_briefcase_plus", 0xF0A2B),
    ("md_briefcase_plus_outline", 0xF0C40),
    ("md_briefcase_remove", 0xF0A2C),
    ("md_briefcase_remove_outline", 0xF0C41),
    ("md_briefcase_search", 0xF0A2D),
    ("md_briefcase_search_outline", 0xF0C42),
    ("md_briefcase_upload", 0xF00D9),
    ("md_briefcase_upload_outline", 0xF0C43),
    ("md_briefcase_variant", 0xF1494),
    ("md_briefcase_variant_off", 0xF165A),
    ("md_briefcase_variant_off_outline", 0xF165B),
    ("md_briefcase_variant_outline", 0xF1495),
    ("md_brightness_1", 0xF00DA),
    ("md_brightness_2", 0xF00DB),
    ("md_brightness_3", 0xF00DC),
    ("md_brightness_4", 0xF00DD),
    ("md_brightness_5", 0xF00DE),
    ("md_brightness_6", 0xF00DF),
    ("md_brightness_7", 0xF00E0),
    ("md_brightness_auto", 0xF00E1),
    ("md_brightness_percent", 0xF0CF2),
    ("md_broadcast", 0xF1720),
    ("md_broadcast_off", 0xF1721),
    ("md_broom", 0xF00E2),
    ("md_brush", 0xF00E3),
    ("md_brush_off", 0xF1771),
    ("md_brush_outline", 0xF1A0D),
    ("md_brush_variant", 0xF1813),
    ("md_bucket", 0xF1415),
    ("md_bucket_outline", 0xF1416),
    ("md_buffet", 0xF0578),
    ("md_bug", 0xF00E4),
    ("md_bug_check", 0xF0A2E),
    ("md_bug_check_outline", 0xF0A2F),
    ("md_bug_outline", 0xF0A30),
    ("md_bugle", 0xF0DB4),
    ("md_bulkhead_light", 0xF1A2F),
    ("md_bulldozer", 0xF0B22),
    ("md_bullet", 0xF0CF3),
    ("md_bulletin_board", 0xF00E5),
    ("md_bullhorn", 0xF00E6),
    ("md_bullhorn_outline", 0xF0B23),
    ("md_bullhorn_variant", 0xF196E),
    ("md_bullhorn_variant_outline", 0xF196F),
    ("md_bullseye", 0xF05DD),
    ("md_bullseye_arrow", 0xF08C9),
    ("md_bulma", 0xF12E7),
    ("md_bunk_bed", 0xF1302),
    ("md_bunk_bed_outline", 0xF0097),
    ("md_bus", 0xF00E7),
    ("md_bus_alert", 0xF0A99),
    ("md_bus_articulated_end", 0xF079C),
    ("md_bus_articulated_front", 0xF079D),
    ("md_bus_clock", 0xF08CA),
    ("md_bus_double_decker", 0xF079E),
    ("md_bus_electric", 0xF191D),
    ("md_bus_marker", 0xF1212),
    ("md_bus_multiple", 0xF0F3F),
    ("md_bus_school", 0xF079F),
    ("md_bus_side", 0xF07A0),
    ("md_bus_stop", 0xF1012),
    ("md_bus_stop_covered", 0xF1013),
    ("md_bus_stop_uncovered", 0xF1014),
    ("md_butterfly", 0xF1589),
    ("md_butterfly_outline", 0xF158A),
    ("md_cabin_a_frame", 0xF188C),
    ("md_cable_data", 0xF1394),
    ("md_cached", 0xF00E8),
    ("md_cactus", 0xF0DB5),
    ("md_cake", 0xF00E9),
    ("md_cake_layered", 0xF00EA),
    ("md_cake_variant", 0xF00EB),
    ("md_cake_variant_outline", 0xF17F0),
    ("md_calculator", 0xF00EC),
    ("md_calculator_variant", 0xF0A9A),
    ("md_calculator_variant_outline", 0xF15A6),
    ("md_calendar", 0xF00ED),
    ("md_calendar_account", 0xF0ED7),
    ("md_calendar_account_outline", 0xF0ED8),
    ("md_calendar_alert", 0xF0A31),
    ("md_calendar_arrow_left", 0xF1134),
    ("md_calendar_arrow_right", 0xF1135),
    ("md_calendar_blank", 0xF00EE),
    ("md_calendar_blank_multiple", 0xF1073),
    ("md_calendar_blank_outline", 0xF0B66),
    ("md_calendar_check", 0xF00EF),
    ("md_calendar_check_outline", 0xF0C44),
    ("md_calendar_clock", 0xF00F0),
    ("md_calendar_clock_outline", 0xF16E1),
    ("md_calendar_collapse_horizontal", 0xF189D),
    ("md_calendar_cursor", 0xF157B),
    ("md_calendar_edit", 0xF08A7),
    ("md_calendar_end", 0xF166C),
    ("md_calendar_expand_horizontal", 0xF189E),
    ("md_calendar_export", 0xF0B24),
    ("md_calendar_heart", 0xF09D2),
    ("md_calendar_import", 0xF0B25),
    ("md_calendar_lock", 0xF1641),
    ("md_calendar_lock_outline", 0xF1642),
    ("md_calendar_minus", 0xF0D5C),
    ("md_calendar_month", 0xF0E17),
    ("md_calendar_month_outline", 0xF0E18),
    ("md_calendar_multiple", 0xF00F1),
    ("md_calendar_multiple_check", 0xF00F2),
    ("md_calendar_multiselect", 0xF0A32),
    ("md_calendar_outline", 0xF0B67),
    ("md_calendar_plus", 0xF00F3),
    ("md_calendar_question", 0xF0692),
    ("md_calendar_range", 0xF0679),
    ("md_calendar_range_outline", 0xF0B68),
    ("md_calendar_refresh", 0xF01E1),
    ("md_calendar_refresh_outline", 0xF0203),
    ("md_calendar_remove", 0xF00F4),
    ("md_calendar_remove_outline", 0xF0C45),
    ("md_calendar_search", 0xF094C),
    ("md_calendar_star", 0xF09D3),
    ("md_calendar_start", 0xF166D),
    ("md_calendar_sync", 0xF0E8E),
    ("md_calendar_sync_outline", 0xF0E8F),
    ("md_calendar_text", 0xF00F5),
    ("md_calendar_text_outline", 0xF0C46),
    ("md_calendar_today", 0xF00F6),
    ("md_calendar_today_outline", 0xF1A30),
    ("md_calendar_week", 0xF0A33),
    ("md_calendar_week_begin", 0xF0A34),
    ("md_calendar_week_begin_outline", 0xF1A31),
    ("md_calendar_week_end", 0xF1A32),
    ("md_calendar_week_end_outline", 0xF1A33),
    ("md_calendar_week_outline", 0xF1A34),
    ("md_calendar_weekend", 0xF0ED9),
    ("md_calendar_weekend_outline", 0xF0EDA),
    ("md_call_made", 0xF00F7),
    ("md_call_merge", 0xF00F8),
    ("md_call_missed", 0xF00F9),
    ("md_call_received", 0xF00FA),
    ("md_call_split", 0xF00FB),
    ("md_camcorder", 0xF00FC),
    ("md_camcorder_off", 0xF00FF),
    ("md_camera", 0xF0100),
    ("md_camera_account", 0xF08CB),
    ("md_camera_burst", 0xF0693),
    ("md_camera_control", 0xF0B69),
    ("md_camera_document", 0xF1871),
    ("md_camera_document_off", 0xF1872),
    ("md_camera_enhance", 0xF0101),
    ("md_camera_enhance_outline", 0xF0B6A),
    ("md_camera_flip", 0xF15D9),
    ("md_camera_flip_outline", 0xF15DA),
    ("md_camera_front", 0xF0102),
    ("md_camera_front_variant", 0xF0103),
    ("md_camera_gopro", 0xF07A1),
    ("md_camera_image", 0xF08CC),
    ("md_camera_iris", 0xF0104),
    ("md_camera_lock", 0xF1A14),
    ("md_camera_lock_outline", 0xF1A15),
    ("md_camera_marker", 0xF19A7),
    ("md_camera_marker_outline", 0xF19A8),
    ("md_camera_metering_center", 0xF07A2),
    ("md_camera_metering_matrix", 0xF07A3),
    ("md_camera_metering_partial", 0xF07A4),
    ("md_camera_metering_spot", 0xF07A5),
    ("md_camera_off", 0xF05DF),
    ("md_camera_off_outline", 0xF19BF),
    ("md_camera_outline", 0xF0D5D),
    ("md_camera_party_mode", 0xF0105),
    ("md_camera_plus", 0xF0EDB),
    ("md_camera_plus_outline", 0xF0EDC),
    ("md_camera_rear", 0xF0106),
    ("md_camera_rear_variant", 0xF0107),
    ("md_camera_retake", 0xF0E19),
    ("md_camera_retake_outline", 0xF0E1A),
    ("md_camera_switch", 0xF0108),
    ("md_camera_switch_outline", 0xF084A),
    ("md_camera_timer", 0xF0109),
    ("md_camera_wireless", 0xF0DB6),
    ("md_camera_wireless_outline", 0xF0DB7),
    ("md_campfire", 0xF0EDD),
    ("md_cancel", 0xF073A),
    ("md_candelabra", 0xF17D2),
    ("md_candelabra_fire", 0xF17D3),
    ("md_candle", 0xF05E2),
    ("md_candy", 0xF1970),
    ("md_candy_off", 0xF1971),
    ("md_candy_off_outline", 0xF1972),
    ("md_candy_outline", 0xF1973),
    ("md_candycane", 0xF010A),
    ("md_cannabis", 0xF07A6),
    ("md_cannabis_off", 0xF166E),
    ("md_caps_lock", 0xF0A9B),
    ("md_car", 0xF010B),
    ("md_car_2_plus", 0xF1015),
    ("md_car_3_plus", 0xF1016),
    ("md_car_arrow_left", 0xF13B2),
    ("md_car_arrow_right", 0xF13B3),
    ("md_car_back", 0xF0E1B),
    ("md_car_battery", 0xF010C),
    ("md_car_brake_abs", 0xF0C47),
    ("md_car_brake_alert", 0xF0C48),
    ("md_car_brake_fluid_level", 0xF1909),
    ("md_car_brake_hold", 0xF0D5E),
    ("md_car_brake_low_pressure", 0xF190A),
    ("md_car_brake_parking", 0xF0D5F),
    ("md_car_brake_retarder", 0xF1017),
    ("md_car_brake_temperature", 0xF190B),
    ("md_car_brake_worn_linings", 0xF190C),
    ("md_car_child_seat", 0xF0FA3),
    ("md_car_clock", 0xF1974),
    ("md_car_clutch", 0xF1018),
    ("md_car_cog", 0xF13CC),
    ("md_car_connected", 0xF010D),
    ("md_car_convertible", 0xF07A7),
    ("md_car_coolant_level", 0xF1019),
    ("md_car_cruise_control", 0xF0D60),
    ("md_car_defrost_front", 0xF0D61),
    ("md_car_defrost_rear", 0xF0D62),
    ("md_car_door", 0xF0B6B),
    ("md_car_door_lock", 0xF109D),
    ("md_car_electric", 0xF0B6C),
    ("md_car_electric_outline", 0xF15B5),
    ("md_car_emergency", 0xF160F),
    ("md_car_esp", 0xF0C49),
    ("md_car_estate", 0xF07A8),
    ("md_car_hatchback", 0xF07A9),
    ("md_car_info", 0xF11BE),
    ("md_car_key", 0xF0B6D),
    ("md_car_lifted_pickup", 0xF152D),
    ("md_car_light_alert", 0xF190D),
    ("md_car_light_dimmed", 0xF0C4A),
    ("md_car_light_fog", 0xF0C4B),
    ("md_car_light_high", 0xF0C4C),
    ("md_car_limousine", 0xF08CD),
    ("md_car_multiple", 0xF0B6E),
    ("md_car_off", 0xF0E1C),
    ("md_car_outline", 0xF14ED),
    ("md_car_parking_lights", 0xF0D63),
    ("md_car_pickup", 0xF07AA),
    ("md_car_seat", 0xF0FA4),
    ("md_car_seat_cooler", 0xF0FA5),
    ("md_car_seat_heater", 0xF0FA6),
    ("md_car_select", 0xF1879),
    ("md_car_settings", 0xF13CD),
    ("md_car_shift_pattern", 0xF0F40),
    ("md_car_side", 0xF07AB),
    ("md_car_speed_limiter", 0xF190E),
    ("md_car_sports", 0xF07AC),
    ("md_car_tire_alert", 0xF0C4D),
    ("md_car_traction_control", 0xF0D64),
    ("md_car_turbocharger", 0xF101A),
    ("md_car_wash", 0xF010E),
    ("md_car_windshield", 0xF101B),
    ("md_car_windshield_outline", 0xF101C),
    ("md_car_wireless", 0xF1878),
    ("md_car_wrench", 0xF1814),
    ("md_carabiner", 0xF14C0),
    ("md_caravan", 0xF07AD),
    ("md_card", 0xF0B6F),
    ("md_card_account_details", 0xF05D2),
    ("md_card_account_details_outline", 0xF0DAB),
    ("md_card_account_details_star", 0xF02A3),
    ("md_card_account_details_star_outline", 0xF06DB),
    ("md_card_account_mail", 0xF018E),
    ("md_card_account_mail_outline", 0xF0E98),
    ("md_card_account_phone", 0xF0E99),
    ("md_card_account_phone_outline", 0xF0E9A),
    ("md_card_bulleted", 0xF0B70),
    ("md_card_bulleted_off", 0xF0B71),
    ("md_card_bulleted_off_outline", 0xF0B72),
    ("md_card_bulleted_outline", 0xF0B73),
    ("md_card_bulleted_settings", 0xF0B74),
    ("md_card_bulleted_settings_outline", 0xF0B75),
    ("md_card_minus", 0xF1600),
    ("md_card_minus_outline", 0xF1601),
    ("md_card_multiple", 0xF17F1),
    ("md_card_multiple_outline", 0xF17F2),
    ("md_card_off", 0xF1602),
    ("md_card_off_outline", 0xF1603),
    ("md_card_outline", 0xF0B76),
    ("md_card_plus", 0xF11FF),
    ("md_card_plus_outline", 0xF1200),
    ("md_card_remove", 0xF1604),
    ("md_card_remove_outline", 0xF1605),
    ("md_card_search", 0xF1074),
    ("md_card_search_outline", 0xF1075),
    ("md_card_text", 0xF0B77),
    ("md_card_text_outline", 0xF0B78),
    ("md_cards", 0xF0638),
    ("md_cards_club", 0xF08CE),
    ("md_cards_club_outline", 0xF189F),
    ("md_cards_diamond", 0xF08CF),
    ("md_cards_diamond_outline", 0xF101D),
    ("md_cards_outline", 0xF0639),
    ("md_cards_playing", 0xF18A1),
    ("md_cards_playing_club", 0xF18A2),
    ("md_cards_playing_club_multiple", 0xF18A3),
    ("md_cards_playing_club_multiple_outline", 0xF18A4),
    ("md_cards_playing_club_outline", 0xF18A5),
    ("md_cards_playing_diamond", 0xF18A6),
    ("md_cards_playing_diamond_multiple", 0xF18A7),
    ("md_cards_playing_diamond_multiple_outline", 0xF18A8),
    ("md_cards_playing_diamond_outline", 0xF18A9),
    ("md_cards_playing_heart", 0xF18AA),
    ("md_cards_playing_heart_multiple", 0xF18AB),
    ("md_cards_playing_heart_multiple_outline", 0xF18AC),
    ("md_cards_playing_heart_outline", 0xF18AD),
    ("md_cards_playing_outline", 0xF063A),
    ("md_cards_playing_spade", 0xF18AE),
    ("md_cards_playing_spade_multiple", 0xF18AF),
    ("md_cards_playing_spade_multiple_outline", 0xF18B0),
    ("md_cards_playing_spade_outline", 0xF18B1),
    ("md_cards_spade", 0xF08D1),
    ("md_cards_spade_outline", 0xF18B2),
    ("md_cards_variant", 0xF06C7),
    ("md_carrot", 0xF010F),
    ("md_cart", 0xF0110),
    ("md_cart_arrow_down", 0xF0D66),
    ("md_cart_arrow_right", 0xF0C4E),
    ("md_cart_arrow_up", 0xF0D67),
    ("md_cart_check", 0xF15EA),
    ("md_cart_heart", 0xF18E0),
    ("md_cart_minus", 0xF0D68),
    ("md_cart_off", 0xF066B),
    ("md_cart_outline", 0xF0111),
    ("md_cart_plus", 0xF0112),
    ("md_cart_remove", 0xF0D69),
    ("md_cart_variant", 0xF15EB),
    ("md_case_sensitive_alt", 0xF0113),
    ("md_cash", 0xF0114),
    ("md_cash_100", 0xF0115),
    ("md_cash_check", 0xF14EE),
    ("md_cash_clock", 0xF1A91),
    ("md_cash_fast", 0xF185C),
    ("md_cash_lock", 0xF14EA),
    ("md_cash_lock_open", 0xF14EB),
    ("md_cash_marker", 0xF0DB8),
    ("md_cash_minus", 0xF1260),
    ("md_cash_multiple", 0xF0116),
    ("md_cash_plus", 0xF1261),
    ("md_cash_refund", 0xF0A9C),
    ("md_cash_register", 0xF0CF4),
    ("md_cash_remove", 0xF1262),
    ("md_cash_sync", 0xF1A92),
    ("md_cassette", 0xF09D4),
    ("md_cast", 0xF0118),
    ("md_cast_audio", 0xF101E),
    ("md_cast_audio_variant", 0xF1749),
    ("md_cast_connected", 0xF0119),
    ("md_cast_education", 0xF0E1D),
    ("md_cast_off", 0xF078A),
    ("md_cast_variant", 0xF001F),
    ("md_castle", 0xF011A),
    ("md_cat", 0xF011B),
    ("md_cctv", 0xF07AE),
    ("md_cctv_off", 0xF185F),
    ("md_ceiling_fan", 0xF1797),
    ("md_ceiling_fan_light", 0xF1798),
    ("md_ceiling_light", 0xF0769),
    ("md_ceiling_light_multiple", 0xF18DD),
    ("md_ceiling_light_multiple_outline", 0xF18DE),
    ("md_ceiling_light_outline", 0xF17C7),
    ("md_cellphone", 0xF011C),
    ("md_cellphone_arrow_down", 0xF09D5),
    ("md_cellphone_arrow_down_variant", 0xF19C5),
    ("md_cellphone_basic", 0xF011E),
    ("md_cellphone_charging", 0xF1397),
    ("md_cellphone_check", 0xF17FD),
    ("md_cellphone_cog", 0xF0951),
    ("md_cellphone_dock", 0xF011F),
    ("md_cellphone_information", 0xF0F41),
    ("md_cellphone_key", 0xF094E),
    ("md_cellphone_link", 0xF0121),
    ("md_cellphone_link_off", 0xF0122),
    ("md_cellphone_lock", 0xF094F),
    ("md_cellphone_marker", 0xF183A),
    ("md_cellphone_message", 0xF08D3),
    ("md_cellphone_message_off", 0xF10D2),
    ("md_cellphone_nfc", 0xF0E90),
    ("md_cellphone_nfc_off", 0xF12D8),
    ("md_cellphone_off", 0xF0950),
    ("md_cellphone_play", 0xF101F),
    ("md_cellphone_remove", 0xF094D),
    ("md_cellphone_screenshot", 0xF0A35),
    ("md_cellphone_settings", 0xF0123),
    ("md_cellphone_sound", 0xF0952),
    ("md_cellphone_text", 0xF08D2),
    ("md_cellphone_wireless", 0xF0815),
    ("md_centos", 0xF111A),
    ("md_certificate", 0xF0124),
    ("md_certificate_outline", 0xF1188),
    ("md_chair_rolling", 0xF0F48),
    ("md_chair_school", 0xF0125),
    ("md_chandelier", 0xF1793),
    ("md_charity", 0xF0C4F),
    ("md_chart_arc", 0xF0126),
    ("md_chart_areaspline", 0xF0127),
    ("md_chart_areaspline_variant", 0xF0E91),
    ("md_chart_bar", 0xF0128),
    ("md_chart_bar_stacked", 0xF076A),
    ("md_chart_bell_curve", 0xF0C50),
    ("md_chart_bell_curve_cumulative", 0xF0FA7),
    ("md_chart_box", 0xF154D),
    ("md_chart_box_outline", 0xF154E),
    ("md_chart_box_plus_outline", 0xF154F),
    ("md_chart_bubble", 0xF05E3),
    ("md_chart_donut", 0xF07AF),
    ("md_chart_donut_variant", 0xF07B0),
    ("md_chart_gantt", 0xF066C),
    ("md_chart_histogram", 0xF0129),
    ("md_chart_line", 0xF012A),
    ("md_chart_line_stacked", 0xF076B),
    ("md_chart_line_variant", 0xF07B1),
    ("md_chart_multiline", 0xF08D4),
    ("md_chart_multiple", 0xF1213),
    ("md_chart_pie", 0xF012B),
    ("md_chart_ppf", 0xF1380),
    ("md_chart_sankey", 0xF11DF),
    ("md_chart_sankey_variant", 0xF11E0),
    ("md_chart_scatter_plot", 0xF0E92),
    ("md_chart_scatter_plot_hexbin", 0xF066D),
    ("md_chart_timeline", 0xF066E),
    ("md_chart_timeline_variant", 0xF0E93),
    ("md_chart_timeline_variant_shimmer", 0xF15B6),
    ("md_chart_tree", 0xF0E94),
    ("md_chart_waterfall", 0xF1918),
    ("md_chat", 0xF0B79),
    ("md_chat_alert", 0xF0B7A),
    ("md_chat_alert_outline", 0xF12C9),
    ("md_chat_minus", 0xF1410),
    ("md_chat_minus_outline", 0xF1413),
    ("md_chat_outline", 0xF0EDE),
    ("md_chat_plus", 0xF140F),
    ("md_chat_plus_outline", 0xF1412),
    ("md_chat_processing", 0xF0B7B),
    ("md_chat_processing_outline", 0xF12CA),
    ("md_chat_question", 0xF1738),
    ("md_chat_question_outline", 0xF1739),
    ("md_chat_remove", 0xF1411),
    ("md_chat_remove_outline", 0xF1414),
    ("md_chat_sleep", 0xF12D1),
    ("md_chat_sleep_outline", 0xF12D2),
    ("md_check", 0xF012C),
    ("md_check_all", 0xF012D),
    ("md_check_bold", 0xF0E1E),
    ("md_check_circle", 0xF05E0),
    ("md_check_circle_outline", 0xF05E1),
    ("md_check_decagram", 0xF0791),
    ("md_check_decagram_outline", 0xF1740),
    ("md_check_network", 0xF0C53),
    ("md_check_network_outline", 0xF0C54),
    ("md_check_outline", 0xF0855),
    ("md_check_underline", 0xF0E1F),
    ("md_check_underline_circle", 0xF0E20),
    ("md_check_underline_circle_outline", 0xF0E21),
    ("md_checkbook", 0xF0A9D),
    ("md_checkbox_blank", 0xF012E),
    ("md_checkbox_blank_badge", 0xF1176),
    ("md_checkbox_blank_badge_outline", 0xF0117),
    ("md_checkbox_blank_circle", 0xF012F),
    ("md_checkbox_blank_circle_outline", 0xF0130),
    ("md_checkbox_blank_off", 0xF12EC),
    ("md_checkbox_blank_off_outline", 0xF12ED),
    ("md_checkbox_blank_outline", 0xF0131),
    ("md_checkbox_intermediate", 0xF0856),
    ("md_checkbox_marked", 0xF0132),
    ("md_checkbox_marked_circle", 0xF0133),
    ("md_checkbox_marked_circle_outline", 0xF0134),
    ("md_checkbox_marked_circle_plus_outline", 0xF1927),
    ("md_checkbox_marked_outline", 0xF0135),
    ("md_checkbox_multiple_blank", 0xF0136),
    ("md_checkbox_multiple_blank_circle", 0xF063B),
    ("md_checkbox_multiple_blank_circle_outline", 0xF063C),
    ("md_checkbox_multiple_blank_outline", 0xF0137),
    ("md_checkbox_multiple_marked", 0xF0138),
    ("md_checkbox_multiple_marked_circle", 0xF063D),
    ("md_checkbox_multiple_marked_circle_outline", 0xF063E),
    ("md_checkbox_multiple_marked_outline", 0xF0139),
    ("md_checkbox_multiple_outline", 0xF0C51),
    ("md_checkbox_outline", 0xF0C52),
    ("md_checkerboard", 0xF013A),
    ("md_checkerboard_minus", 0xF1202),
    ("md_checkerboard_plus", 0xF1201),
    ("md_checkerboard_remove", 0xF1203),
    ("md_cheese", 0xF12B9),
    ("md_cheese_off", 0xF13EE),
    ("md_chef_hat", 0xF0B7C),
    ("md_chemical_weapon", 0xF013B),
    ("md_chess_bishop", 0xF085C),
    ("md_chess_king", 0xF0857),
    ("md_chess_knight", 0xF0858),
    ("md_chess_pawn", 0xF0859),
    ("md_chess_queen", 0xF085A),
    ("md_chess_rook", 0xF085B),
    ("md_chevron_double_down", 0xF013C),
    ("md_chevron_double_left", 0xF013D),
    ("md_chevron_double_right", 0xF013E),
    ("md_chevron_double_up", 0xF013F),
    ("md_chevron_down", 0xF0140),
    ("md_chevron_down_box", 0xF09D6),
    ("md_chevron_down_box_outline", 0xF09D7),
    ("md_chevron_down_circle", 0xF0B26),
    ("md_chevron_down_circle_outline", 0xF0B27),
    ("md_chevron_left", 0xF0141),
    ("md_chevron_left_box", 0xF09D8),
    ("md_chevron_left_box_outline", 0xF09D9),
    ("md_chevron_left_circle", 0xF0B28),
    ("md_chevron_left_circle_outline", 0xF0B29),
    ("md_chevron_right", 0xF0142),
    ("md_chevron_right_box", 0xF09DA),
    ("md_chevron_right_box_outline", 0xF09DB),
    ("md_chevron_right_circle", 0xF0B2A),
    ("md_chevron_right_circle_outline", 0xF0B2B),
    ("md_chevron_triple_down", 0xF0DB9),
    ("md_chevron_triple_left", 0xF0DBA),
    ("md_chevron_triple_right", 0xF0DBB),
    ("md_chevron_triple_up", 0xF0DBC),
    ("md_chevron_up", 0xF0143),
    ("md_chevron_up_box", 0xF09DC),
    ("md_chevron_up_box_outline", 0xF09DD),
    ("md_chevron_up_circle", 0xF0B2C),
    ("md_chevron_up_circle_outline", 0xF0B2D),
    ("md_chili_alert", 0xF17EA),
    ("md_chili_alert_outline", 0xF17EB),
    ("md_chili_hot", 0xF07B2),
    ("md_chili_hot_outline", 0xF17EC),
    ("md_chili_medium", 0xF07B3),
    ("md_chili_medium_outline", 0xF17ED),
    ("md_chili_mild", 0xF07B4),
    ("md_chili_mild_outline", 0xF17EE),
    ("md_chili_off", 0xF1467),
    ("md_chili_off_outline", 0xF17EF),
    ("md_chip", 0xF061A),
    ("md_church", 0xF0144),
    ("md_cigar", 0xF1189),
    ("md_cigar_off", 0xF141B),
    ("md_circle_box", 0xF15DC),
    ("md_circle_box_outline", 0xF15DD),
    ("md_circle_double", 0xF0E95),
    ("md_circle_edit_outline", 0xF08D5),
    ("md_circle_expand", 0xF0E96),
    ("md_circle_half", 0xF1395),
    ("md_circle_half_full", 0xF1396),
    ("md_circle_medium", 0xF09DE),
    ("md_circle_multiple", 0xF0B38),
    ("md_circle_multiple_outline", 0xF0695),
    ("md_circle_off_outline", 0xF10D3),
    ("md_circle_opacity", 0xF1853),
    ("md_circle_slice_1", 0xF0A9E),
    ("md_circle_slice_2", 0xF0A9F),
    ("md_circle_slice_3", 0xF0AA0),
    ("md_circle_slice_4", 0xF0AA1),
    ("md_circle_slice_5", 0xF0AA2),
    ("md_circle_slice_6", 0xF0AA3),
    ("md_circle_slice_7", 0xF0AA4),
    ("md_circle_slice_8", 0xF0AA5),
    ("md_circle_small", 0xF09DF),
    ("md_circular_saw", 0xF0E22),
    ("md_city", 0xF0146),
    ("md_city_variant", 0xF0A36),
    ("md_city_variant_outline", 0xF0A37),
    ("md_clipboard", 0xF0147),
    ("md_clipboard_account", 0xF0148),
    ("md_clipboard_account_outline", 0xF0C55),
    ("md_clipboard_alert", 0xF0149),
    ("md_clipboard_alert_outline", 0xF0CF7),
    ("md_clipboard_arrow_down", 0xF014A),
    ("md_clipboard_arrow_down_outline", 0xF0C56),
    ("md_clipboard_arrow_left", 0xF014B),
    ("md_clipboard_arrow_left_outline", 0xF0CF8),
    ("md_clipboard_arrow_right", 0xF0CF9),
    ("md_clipboard_arrow_right_outline", 0xF0CFA),
    ("md_clipboard_arrow_up", 0xF0C57),
    ("md_clipboard_arrow_up_outline", 0xF0C58),
    ("md_clipboard_check", 0xF014E),
    ("md_clipboard_check_multiple", 0xF1263),
    ("md_clipboard_check_multiple_outline", 0xF1264),
    ("md_clipboard_check_outline", 0xF08A8),
    ("md_clipboard_clock", 0xF16E2),
    ("md_clipboard_clock_outline", 0xF16E3),
    ("md_clipboard_edit", 0xF14E5),
    ("md_clipboard_edit_outline", 0xF14E6),
    ("md_clipboard_file", 0xF1265),
    ("md_clipboard_file_outline", 0xF1266),
    ("md_clipboard_flow", 0xF06C8),
    ("md_clipboard_flow_outline", 0xF1117),
    ("md_clipboard_list", 0xF10D4),
    ("md_clipboard_list_outline", 0xF10D5),
    ("md_clipboard_minus", 0xF1618),
    ("md_clipboard_minus_outline", 0xF1619),
    ("md_clipboard_multiple", 0xF1267),
    ("md_clipboard_multiple_outline", 0xF1268),
    ("md_clipboard_off", 0xF161A),
    ("md_clipboard_off_outline", 0xF161B),
    ("md_clipboard_outline", 0xF014C),
    ("md_clipboard_play", 0xF0C59),
    ("md_clipboard_play_multiple", 0xF1269),
    ("md_clipboard_play_multiple_outline", 0xF126A),
    ("md_clipboard_play_outline", 0xF0C5A),
    ("md_clipboard_plus", 0xF0751),
    ("md_clipboard_plus_outline", 0xF131F),
    ("md_clipboard_pulse", 0xF085D),
    ("md_clipboard_pulse_outline", 0xF085E),
    ("md_clipboard_remove", 0xF161C),
    ("md_clipboard_remove_outline", 0xF161D),
    ("md_clipboard_search", 0xF161E),
    ("md_clipboard_search_outline", 0xF161F),
    ("md_clipboard_text", 0xF014D),
    ("md_clipboard_text_clock", 0xF18F9),
    ("md_clipboard_text_clock_outline", 0xF18FA),
    ("md_clipboard_text_multiple", 0xF126B),
    ("md_clipboard_text_multiple_outline", 0xF126C),
    ("md_clipboard_text_off", 0xF1620),
    ("md_clipboard_text_off_outline", 0xF1621),
    ("md_clipboard_text_outline", 0xF0A38),
    ("md_clipboard_text_play", 0xF0C5B),
    ("md_clipboard_text_play_outline", 0xF0C5C),
    ("md_clipboard_text_search", 0xF1622),
    ("md_clipboard_text_search_outline", 0xF1623),
    ("md_clippy", 0xF014F),
    ("md_clock", 0xF0954),
    ("md_clock_alert", 0xF0955),
    ("md_clock_alert_outline", 0xF05CE),
    ("md_clock_check", 0xF0FA8),
    ("md_clock_check_outline", 0xF0FA9),
    ("md_clock_digital", 0xF0E97),
    ("md_clock_edit", 0xF19BA),
    ("md_clock_edit_outline", 0xF19BB),
    ("md_clock_end", 0xF0151),
    ("md_clock_fast", 0xF0152),
    ("md_clock_in", 0xF0153),
    ("md_clock_minus", 0xF1863),
    ("md_clock_minus_outline", 0xF1864),
    ("md_clock_out", 0xF0154),
    ("md_clock_outline", 0xF0150),
    ("md_clock_plus", 0xF1861),
    ("md_clock_plus_outline", 0xF1862),
    ("md_clock_remove", 0xF1865),
    ("md_clock_remove_outline", 0xF1866),
    ("md_clock_start", 0xF0155),
    ("md_clock_time_eight", 0xF1446),
    ("md_clock_time_eight_outline", 0xF1452),
    ("md_clock_time_eleven", 0xF1449),
    ("md_clock_time_eleven_outline", 0xF1455),
    ("md_clock_time_five", 0xF1443),
    ("md_clock_time_five_outline", 0xF144F),
    ("md_clock_time_four", 0xF1442),
    ("md_clock_time_four_outline", 0xF144E),
    ("md_clock_time_nine", 0xF1447),
    ("md_clock_time_nine_outline", 0xF1453),
    ("md_clock_time_one", 0xF143F),
    ("md_clock_time_one_outline", 0xF144B),
    ("md_clock_time_seven", 0xF1445),
    ("md_clock_time_seven_outline", 0xF1451),
    ("md_clock_time_six", 0xF1444),
    ("md_clock_time_six_outline", 0xF1450),
    ("md_clock_time_ten", 0xF1448),
    ("md_clock_time_ten_outline", 0xF1454),
    ("md_clock_time_three", 0xF1441),
    ("md_clock_time_three_outline", 0xF144D),
    ("md_clock_time_twelve", 0xF144A),
    ("md_clock_time_twelve_outline", 0xF1456),
    ("md_clock_time_two", 0xF1440),
    ("md_clock_time_two_outline", 0xF144C),
    ("md_close", 0xF0156),
    ("md_close_box", 0xF0157),
    ("md_close_box_multiple", 0xF0C5D),
    ("md_close_box_multiple_outline", 0xF0C5E),
    ("md_close_box_outline", 0xF0158),
    ("md_close_circle", 0xF0159),
    ("md_close_circle_multiple", 0xF062A),
    ("md_close_circle_multiple_outline", 0xF0883),
    ("md_close_circle_outline", 0xF015A),
    ("md_close_network", 0xF015B),
    ("md_close_network_outline", 0xF0C5F),
    ("md_close_octagon", 0xF015C),
    ("md_close_octagon_outline", 0xF015D),
    ("md_close_outline", 0xF06C9),
    ("md_close_thick", 0xF1398),
    ("md_closed_caption", 0xF015E),
    ("md_closed_caption_outline", 0xF0DBD),
    ("md_cloud", 0xF015F),
    ("md_cloud_alert", 0xF09E0),
    ("md_cloud_braces", 0xF07B5),
    ("md_cloud_check", 0xF0160),
    ("md_cloud_check_outline", 0xF12CC),
    ("md_cloud_circle", 0xF0161),
    ("md_cloud_download", 0xF0162),
    ("md_cloud_download_outline", 0xF0B7D),
    ("md_cloud_lock", 0xF11F1),
    ("md_cloud_lock_outline", 0xF11F2),
    ("md_cloud_off_outline", 0xF0164),
    ("md_cloud_outline", 0xF0163),
    ("md_cloud_percent", 0xF1A35),
    ("md_cloud_percent_outline", 0xF1A36),
    ("md_cloud_print", 0xF0165),
    ("md_cloud_print_outline", 0xF0166),
    ("md_cloud_question", 0xF0A39),
    ("md_cloud_refresh", 0xF052A),
    ("md_cloud_search", 0xF0956),
    ("md_cloud_search_outline", 0xF0957),
    ("md_cloud_sync", 0xF063F),
    ("md_cloud_sync_outline", 0xF12D6),
    ("md_cloud_tags", 0xF07B6),
    ("md_cloud_upload", 0xF0167),
    ("md_cloud_upload_outline", 0xF0B7E),
    ("md_clover", 0xF0816),
    ("md_coach_lamp", 0xF1020),
    ("md_coach_lamp_variant", 0xF1A37),
    ("md_coat_rack", 0xF109E),
    ("md_code_array", 0xF0168),
    ("md_code_braces", 0xF0169),
    ("md_code_braces_box", 0xF10D6),
    ("md_code_brackets", 0xF016A),
    ("md_code_equal", 0xF016B),
    ("md_code_greater_than", 0xF016C),
    ("md_code_greater_than_or_equal", 0xF016D),
    ("md_code_json", 0xF0626),
    ("md_code_less_than", 0xF016E),
    ("md_code_less_than_or_equal", 0xF016F),
    ("md_code_not_equal", 0xF0170),
    ("md_code_not_equal_variant", 0xF0171),
    ("md_code_parentheses", 0xF0172),
    ("md_code_parentheses_box", 0xF10D7),
    ("md_code_string", 0xF0173),
    ("md_code_tags", 0xF0174),
    ("md_code_tags_check", 0xF0694),
    ("md_codepen", 0xF0175),
    ("md_coffee", 0xF0176),
    ("md_coffee_maker", 0xF109F),
    ("md_coffee_maker_check", 0xF1931),
    ("md_coffee_maker_check_outline", 0xF1932),
    ("md_coffee_maker_outline", 0xF181B),
    ("md_coffee_off", 0xF0FAA),
    ("md_coffee_off_outline", 0xF0FAB),
    ("md_coffee_outline", 0xF06CA),
    ("md_coffee_to_go", 0xF0177),
    ("md_coffee_to_go_outline", 0xF130E),
    ("md_coffin", 0xF0B7F),
    ("md_cog", 0xF0493),
    ("md_cog_box", 0xF0494),
    ("md_cog_clockwise", 0xF11DD),
    ("md_cog_counterclockwise", 0xF11DE),
    ("md_cog_off", 0xF13CE),
    ("md_cog_off_outline", 0xF13CF),
    ("md_cog_outline", 0xF08BB),
    ("md_cog_pause", 0xF1933),
    ("md_cog_pause_outline", 0xF1934),
    ("md_cog_play", 0xF1935),
    ("md_cog_play_outline", 0xF1936),
    ("md_cog_refresh", 0xF145E),
    ("md_cog_refresh_outline", 0xF145F),
    ("md_cog_stop", 0xF1937),
    ("md_cog_stop_outline", 0xF1938),
    ("md_cog_sync", 0xF1460),
    ("md_cog_sync_outline", 0xF1461),
    ("md_cog_transfer", 0xF105B),
    ("md_cog_transfer_outline", 0xF105C),
    ("md_cogs", 0xF08D6),
    ("md_collage", 0xF0640),
    ("md_collapse_all", 0xF0AA6),
    ("md_collapse_all_outline", 0xF0AA7),
    ("md_color_helper", 0xF0179),
    ("md_comma", 0xF0E23),
    ("md_comma_box", 0xF0E2B),
    ("md_comma_box_outline", 0xF0E24),
    ("md_comma_circle", 0xF0E25),
    ("md_comma_circle_outline", 0xF0E26),
    ("md_comment", 0xF017A),
    ("md_comment_account", 0xF017B),
    ("md_comment_account_outline", 0xF017C),
    ("md_comment_alert", 0xF017D),
    ("md_comment_alert_outline", 0xF017E),
    ("md_comment_arrow_left", 0xF09E1),
    ("md_comment_arrow_left_outline", 0xF09E2),
    ("md_comment_arrow_right", 0xF09E3),
    ("md_comment_arrow_right_outline", 0xF09E4),
    ("md_comment_bookmark", 0xF15AE),
    ("md_comment_bookmark_outline", 0xF15AF),
    ("md_comment_check", 0xF017F),
    ("md_comment_check_outline", 0xF0180),
    ("md_comment_edit", 0xF11BF),
    ("md_comment_edit_outline", 0xF12C4),
    ("md_comment_eye", 0xF0A3A),
    ("md_comment_eye_outline", 0xF0A3B),
    ("md_comment_flash", 0xF15B0),
    ("md_comment_flash_outline", 0xF15B1),
    ("md_comment_minus", 0xF15DF),
    ("md_comment_minus_outline", 0xF15E0),
    ("md_comment_multiple", 0xF085F),
    ("md_comment_multiple_outline", 0xF0181),
    ("md_comment_off", 0xF15E1),
    ("md_comment_off_outline", 0xF15E2),
    ("md_comment_outline", 0xF0182),
    ("md_comment_plus", 0xF09E5),
    ("md_comment_plus_outline", 0xF0183),
    ("md_comment_processing", 0xF0184),
    ("md_comment_processing_outline", 0xF0185),
    ("md_comment_question", 0xF0817),
    ("md_comment_question_outline", 0xF0186),
    ("md_comment_quote", 0xF1021),
    ("md_comment_quote_outline", 0xF1022),
    ("md_comment_remove", 0xF05DE),
    ("md_comment_remove_outline", 0xF0187),
    ("md_comment_search", 0xF0A3C),
    ("md_comment_search_outline", 0xF0A3D),
    ("md_comment_text", 0xF0188),
    ("md_comment_text_multiple", 0xF0860),
    ("md_comment_text_multiple_outline", 0xF0861),
    ("md_comment_text_outline", 0xF0189),
    ("md_compare", 0xF018A),
    ("md_compare_horizontal", 0xF1492),
    ("md_compare_remove", 0xF18B3),
    ("md_compare_vertical", 0xF1493),
    ("md_compass", 0xF018B),
    ("md_compass_off", 0xF0B80),
    ("md_compass_off_outline", 0xF0B81),
    ("md_compass_outline", 0xF018C),
    ("md_compass_rose", 0xF1382),
    ("md_compost", 0xF1A38),
    ("md_cone", 0xF194C),
    ("md_cone_off", 0xF194D),
    ("md_connection", 0xF1616),
    ("md_console", 0xF018D),
    ("md_console_line", 0xF07B7),
    ("md_console_network", 0xF08A9),
    ("md_console_network_outline", 0xF0C60),
    ("md_consolidate", 0xF10D8),
    ("md_contactless_payment", 0xF0D6A),
    ("md_contactless_payment_circle", 0xF0321),
    ("md_contactless_payment_circle_outline", 0xF0408),
    ("md_contacts", 0xF06CB),
    ("md_contacts_outline", 0xF05B8),
    ("md_contain", 0xF0A3E),
    ("md_contain_end", 0xF0A3F),
    ("md_contain_start", 0xF0A40),
    ("md_content_copy", 0xF018F),
    ("md_content_cut", 0xF0190),
    ("md_content_duplicate", 0xF0191),
    ("md_content_paste", 0xF0192),
    ("md_content_save", 0xF0193),
    ("md_content_save_alert", 0xF0F42),
    ("md_content_save_alert_outline", 0xF0F43),
    ("md_content_save_all", 0xF0194),
    ("md_content_save_all_outline", 0xF0F44),
    ("md_content_save_check", 0xF18EA),
    ("md_content_save_check_outline", 0xF18EB),
    ("md_content_save_cog", 0xF145B),
    ("md_content_save_cog_outline", 0xF145C),
    ("md_content_save_edit", 0xF0CFB),
    ("md_content_save_edit_outline", 0xF0CFC),
    ("md_content_save_move", 0xF0E27),
    ("md_content_save_move_outline", 0xF0E28),
    ("md_content_save_off", 0xF1643),
    ("md_content_save_off_outline", 0xF1644),
    ("md_content_save_outline", 0xF0818),
    ("md_content_save_settings", 0xF061B),
    ("md_content_save_settings_outline", 0xF0B2E),
    ("md_contrast", 0xF0195),
    ("md_contrast_box", 0xF0196),
    ("md_contrast_circle", 0xF0197),
    ("md_controller_classic", 0xF0B82),
    ("md_controller_classic_outline", 0xF0B83),
    ("md_cookie", 0xF0198),
    ("md_cookie_alert", 0xF16D0),
    ("md_cookie_alert_outline", 0xF16D1),
    ("md_cookie_check", 0xF16D2),
    ("md_cookie_check_outline", 0xF16D3),
    ("md_cookie_clock", 0xF16E4),
    ("md_cookie_clock_outline", 0xF16E5),
    ("md_cookie_cog", 0xF16D4),
    ("md_cookie_cog_outline", 0xF16D5),
    ("md_cookie_edit", 0xF16E6),
    ("md_cookie_edit_outline", 0xF16E7),
    ("md_cookie_lock", 0xF16E8),
    ("md_cookie_lock_outline", 0xF16E9),
    ("md_cookie_minus", 0xF16DA),
    ("md_cookie_minus_outline", 0xF16DB),
    ("md_cookie_off", 0xF16EA),
    ("md_cookie_off_outline", 0xF16EB),
    ("md_cookie_outline", 0xF16DE),
    ("md_cookie_plus", 0xF16D6),
    ("md_cookie_plus_outline", 0xF16D7),
    ("md_cookie_refresh", 0xF16EC),
    ("md_cookie_refresh_outline", 0xF16ED),
    ("md_cookie_remove", 0xF16D8),
    ("md_cookie_remove_outline", 0xF16D9),
    ("md_cookie_settings", 0xF16DC),
    ("md_cookie_settings_outline", 0xF16DD),
    ("md_coolant_temperature", 0xF03C8),
    ("md_copyleft", 0xF1939),
    ("md_copyright", 0xF05E6),
    ("md_cordova", 0xF0958),
    ("md_corn", 0xF07B8),
    ("md_corn_off", 0xF13EF),
    ("md_cosine_wave", 0xF1479),
    ("md_counter", 0xF0199),
    ("md_countertop", 0xF181C),
    ("md_countertop_outline", 0xF181D),
    ("md_cow", 0xF019A),
    ("md_cow_off", 0xF18FC),
    ("md_cpu_32_bit", 0xF0EDF),
    ("md_cpu_64_bit", 0xF0EE0),
    ("md_cradle", 0xF198B),
    ("md_cradle_outline", 0xF1991),
    ("md_crane", 0xF0862),
    ("md_creation", 0xF0674),
    ("md_creative_commons", 0xF0D6B),
    ("md_credit_card", 0xF0FEF),
    ("md_credit_card_check", 0xF13D0),
    ("md_credit_card_check_outline", 0xF13D1),
    ("md_credit_card_chip", 0xF190F),
    ("md_credit_card_chip_outline", 0xF1910),
    ("md_credit_card_clock", 0xF0EE1),
    ("md_credit_card_clock_outline", 0xF0EE2),
    ("md_credit_card_edit", 0xF17D7),
    ("md_credit_card_edit_outline", 0xF17D8),
    ("md_credit_card_fast", 0xF1911),
    ("md_credit_card_fast_outline", 0xF1912),
    ("md_credit_card_lock", 0xF18E7),
    ("md_credit_card_lock_outline", 0xF18E8),
    ("md_credit_card_marker", 0xF06A8),
    ("md_credit_card_marker_outline", 0xF0DBE),
    ("md_credit_card_minus", 0xF0FAC),
    ("md_credit_card_minus_outline", 0xF0FAD),
    ("md_credit_card_multiple", 0xF0FF0),
    ("md_credit_card_multiple_outline", 0xF019C),
    ("md_credit_card_off", 0xF0FF1),
    ("md_credit_card_off_outline", 0xF05E4),
    ("md_credit_card_outline", 0xF019B),
    ("md_credit_card_plus", 0xF0FF2),
    ("md_credit_card_plus_outline", 0xF0676),
    ("md_credit_card_refresh", 0xF1645),
    ("md_credit_card_refresh_outline", 0xF1646),
    ("md_credit_card_refund", 0xF0FF3),
    ("md_credit_card_refund_outline", 0xF0AA8),
    ("md_credit_card_remove", 0xF0FAE),
    ("md_credit_card_remove_outline", 0xF0FAF),
    ("md_credit_card_scan", 0xF0FF4),
    ("md_credit_card_scan_outline", 0xF019D),
    ("md_credit_card_search", 0xF1647),
    ("md_credit_card_search_outline", 0xF1648),
    ("md_credit_card_settings", 0xF0FF5),
    ("md_credit_card_settings_outline", 0xF08D7),
    ("md_credit_card_sync", 0xF1649),
    ("md_credit_card_sync_outline", 0xF164A),
    ("md_credit_card_wireless", 0xF0802),
    ("md_credit_card_wireless_off", 0xF057A),
    ("md_credit_card_wireless_off_outline", 0xF057B),
    ("md_credit_card_wireless_outline", 0xF0D6C),
    ("md_cricket", 0xF0D6D),
    ("md_crop", 0xF019E),
    ("md_crop_free", 0xF019F),
    ("md_crop_landscape", 0xF01A0),
    ("md_crop_portrait", 0xF01A1),
    ("md_crop_rotate", 0xF0696),
    ("md_crop_square", 0xF01A2),
    ("md_cross", 0xF0953),
    ("md_cross_bolnisi", 0xF0CED),
    ("md_cross_celtic", 0xF0CF5),
    ("md_cross_outline", 0xF0CF6),
    ("md_crosshairs", 0xF01A3),
    ("md_crosshairs_gps", 0xF01A4),
    ("md_crosshairs_off", 0xF0F45),
    ("md_crosshairs_question", 0xF1136),
    ("md_crowd", 0xF1975),
    ("md_crown", 0xF01A5),
    ("md_crown_circle", 0xF17DC),
    ("md_crown_circle_outline", 0xF17DD),
    ("md_crown_outline", 0xF11D0),
    ("md_cryengine", 0xF0959),
    ("md_crystal_ball", 0xF0B2F),
    ("md_cube", 0xF01A6),
    ("md_cube_off", 0xF141C),
    ("md_cube_off_outline", 0xF141D),
    ("md_cube_outline", 0xF01A7),
    ("md_cube_scan", 0xF0B84),
    ("md_cube_send", 0xF01A8),
    ("md_cube_unfolded", 0xF01A9),
    ("md_cup", 0xF01AA),
    ("md_cup_off", 0xF05E5),
    ("md_cup_off_outline", 0xF137D),
    ("md_cup_outline", 0xF130F),
    ("md_cup_water", 0xF01AB),
    ("md_cupboard", 0xF0F46),
    ("md_cupboard_outline", 0xF0F47),
    ("md_cupcake", 0xF095A),
    ("md_curling", 0xF0863),
    ("md_currency_bdt", 0xF0864),
    ("md_currency_brl", 0xF0B85),
    ("md_currency_btc", 0xF01AC),
    ("md_currency_cny", 0xF07BA),
    ("md_currency_eth", 0xF07BB),
    ("md_currency_eur", 0xF01AD),
    ("md_currency_eur_off", 0xF1315),
    ("md_currency_fra", 0xF1A39),
    ("md_currency_gbp", 0xF01AE),
    ("md_currency_ils", 0xF0C61),
    ("md_currency_inr", 0xF01AF),
    ("md_currency_jpy", 0xF07BC),
    ("md_currency_krw", 0xF07BD),
    ("md_currency_kzt", 0xF0865),
    ("md_currency_mnt", 0xF1512),
    ("md_currency_ngn", 0xF01B0),
    ("md_currency_php", 0xF09E6),
    ("md_currency_rial", 0xF0E9C),
    ("md_currency_rub", 0xF01B1),
    ("md_currency_rupee", 0xF1976),
    ("md_currency_sign", 0xF07BE),
    ("md_currency_try", 0xF01B2),
    ("md_currency_twd", 0xF07BF),
    ("md_currency_usd", 0xF01C1),
    ("md_currency_usd_off", 0xF067A),
    ("md_current_ac", 0xF1480),
    ("md_current_dc", 0xF095C),
    ("md_cursor_default", 0xF01C0),
    ("md_cursor_default_click", 0xF0CFD),
    ("md_cursor_default_click_outline", 0xF0CFE),
    ("md_cursor_default_gesture", 0xF1127),
    ("md_cursor_default_gesture_outline", 0xF1128),
    ("md_cursor_default_outline", 0xF01BF),
    ("md_cursor_move", 0xF01BE),
    ("md_cursor_pointer", 0xF01BD),
    ("md_cursor_text", 0xF05E7),
    ("md_curtains", 0xF1846),
    ("md_curtains_closed", 0xF1847),
    ("md_cylinder", 0xF194E),
    ("md_cylinder_off", 0xF194F),
    ("md_dance_ballroom", 0xF15FB),
    ("md_dance_pole", 0xF1578),
    ("md_data_matrix", 0xF153C),
    ("md_data_matrix_edit", 0xF153D),
    ("md_data_matrix_minus", 0xF153E),
    ("md_data_matrix_plus", 0xF153F),
    ("md_data_matrix_remove", 0xF1540),
    ("md_data_matrix_scan", 0xF1541),
    ("md_database", 0xF01BC),
    ("md_database_alert", 0xF163A),
    ("md_database_alert_outline", 0xF1624),
    ("md_database_arrow_down", 0xF163B),
    ("md_database_arrow_down_outline", 0xF1625),
    ("md_database_arrow_left", 0xF163C),
    ("md_database_arrow_left_outline", 0xF1626),
    ("md_database_arrow_right", 0xF163D),
    ("md_database_arrow_right_outline", 0xF1627),
    ("md_database_arrow_up", 0xF163E),
    ("md_database_arrow_up_outline", 0xF1628),
    ("md_database_check", 0xF0AA9),
    ("md_database_check_outline", 0xF1629),
    ("md_database_clock", 0xF163F),
    ("md_database_clock_outline", 0xF162A),
    ("md_database_cog", 0xF164B),
    ("md_database_cog_outline", 0xF164C),
    ("md_database_edit", 0xF0B86),
    ("md_database_edit_outline", 0xF162B),
    ("md_database_export", 0xF095E),
    ("md_database_export_outline", 0xF162C),
    ("md_database_eye", 0xF191F),
    ("md_database_eye_off", 0xF1920),
    ("md_database_eye_off_outline", 0xF1921),
    ("md_database_eye_outline", 0xF1922),
    ("md_database_import", 0xF095D),
    ("md_database_import_outline", 0xF162D),
    ("md_database_lock", 0xF0AAA),
    ("md_database_lock_outline", 0xF162E),
    ("md_database_marker", 0xF12F6),
    ("md_database_marker_outline", 0xF162F),
    ("md_database_minus", 0xF01BB),
    ("md_database_minus_outline", 0xF1630),
    ("md_database_off", 0xF1640),
    ("md_database_off_outline", 0xF1631),
    ("md_database_outline", 0xF1632),
    ("md_database_plus", 0xF01BA),
    ("md_database_plus_outline", 0xF1633),
    ("md_database_refresh", 0xF05C2),
    ("md_database_refresh_outline", 0xF1634),
    ("md_database_remove", 0xF0D00),
    ("md_database_remove_outline", 0xF1635),
    ("md_database_search", 0xF0866),
    ("md_database_search_outline", 0xF1636),
    ("md_database_settings", 0xF0D01),
    ("md_database_settings_outline", 0xF1637),
    ("md_database_sync", 0xF0CFF),
    ("md_database_sync_outline", 0xF1638),
    ("md_death_star", 0xF08D8),
    ("md_death_star_variant", 0xF08D9),
    ("md_deathly_hallows", 0xF0B87),
    ("md_debian", 0xF08DA),
    ("md_debug_step_into", 0xF01B9),
    ("md_debug_step_out", 0xF01B8),
    ("md_debug_step_over", 0xF01B7),
    ("md_decagram", 0xF076C),
    ("md_decagram_outline", 0xF076D),
    ("md_decimal", 0xF10A1),
    ("md_decimal_comma", 0xF10A2),
    ("md_decimal_comma_decrease", 0xF10A3),
    ("md_decimal_comma_increase", 0xF10A4),
    ("md_decimal_decrease", 0xF01B6),
    ("md_decimal_increase", 0xF01B5),
    ("md_delete", 0xF01B4),
    ("md_delete_alert", 0xF10A5),
    ("md_delete_alert_outline", 0xF10A6),
    ("md_delete_circle", 0xF0683),
    ("md_delete_circle_outline", 0xF0B88),
    ("md_delete_clock", 0xF1556),
    ("md_delete_clock_outline", 0xF1557),
    ("md_delete_empty", 0xF06CC),
    ("md_delete_empty_outline", 0xF0E9D),
    ("md_delete_forever", 0xF05E8),
    ("md_delete_forever_outline", 0xF0B89),
    ("md_delete_off", 0xF10A7),
    ("md_delete_off_outline", 0xF10A8),
    ("md_delete_outline", 0xF09E7),
    ("md_delete_restore", 0xF0819),
    ("md_delete_sweep", 0xF05E9),
    ("md_delete_sweep_outline", 0xF0C62),
    ("md_delete_variant", 0xF01B3),
    ("md_delta", 0xF01C2),
    ("md_desk", 0xF1239),
    ("md_desk_lamp", 0xF095F),
    ("md_deskphone", 0xF01C3),
    ("md_desktop_classic", 0xF07C0),
    ("md_desktop_mac", 0xF01C4),
    ("md_desktop_mac_dashboard", 0xF09E8),
    ("md_desktop_tower", 0xF01C5),
    ("md_desktop_tower_monitor", 0xF0AAB),
    ("md_details", 0xF01C6),
    ("md_dev_to", 0xF0D6E),
    ("md_developer_board", 0xF0697),
    ("md_deviantart", 0xF01C7),
    ("md_devices", 0xF0FB0),
    ("md_dharmachakra", 0xF094B),
    ("md_diabetes", 0xF1126),
    ("md_dialpad", 0xF061C),
    ("md_diameter", 0xF0C63),
    ("md_diameter_outline", 0xF0C64),
    ("md_diameter_variant", 0xF0C65),
    ("md_diamond", 0xF0B8A),
    ("md_diamond_outline", 0xF0B8B),
    ("md_diamond_stone", 0xF01C8),
    ("md_dice_1", 0xF01CA),
    ("md_dice_1_outline", 0xF114A),
    ("md_dice_2", 0xF01CB),
    ("md_dice_2_outline", 0xF114B),
    ("md_dice_3", 0xF01CC),
    ("md_dice_3_outline", 0xF114C),
    ("md_dice_4", 0xF01CD),
    ("md_dice_4_outline", 0xF114D),
    ("md_dice_5", 0xF01CE),
    ("md_dice_5_outline", 0xF114E),
    ("md_dice_6", 0xF01CF),
    ("md_dice_6_outline", 0xF114F),
    ("md_dice_d10", 0xF1153),
    ("md_dice_d10_outline", 0xF076F),
    ("md_dice_d12", 0xF1154),
    ("md_dice_d12_outline", 0xF0867),
    ("md_dice_d20", 0xF1155),
    ("md_dice_d20_outline", 0xF05EA),
    ("md_dice_d4", 0xF1150),
    ("md_dice_d4_outline", 0xF05EB),
    ("md_dice_d6", 0xF1151),
    ("md_dice_d6_outline", 0xF05ED),
    ("md_dice_d8", 0xF1152),
    ("md_dice_d8_outline", 0xF05EC),
    ("md_dice_multiple", 0xF076E),
    ("md_dice_multiple_outline", 0xF1156),
    ("md_digital_ocean", 0xF1237),
    ("md_dip_switch", 0xF07C1),
    ("md_directions", 0xF01D0),
    ("md_directions_fork", 0xF0641),
    ("md_disc", 0xF05EE),
    ("md_disc_alert", 0xF01D1),
    ("md_disc_player", 0xF0960),
    ("md_discord", 0xF066F),
    ("md_dishwasher", 0xF0AAC),
    ("md_dishwasher_alert", 0xF11B8),
    ("md_dishwasher_off", 0xF11B9),
    ("md_disqus", 0xF01D2),
    ("md_distribute_horizontal_center", 0xF11C9),
    ("md_distribute_horizontal_left", 0xF11C8),
    ("md_distribute_horizontal_right", 0xF11CA),
    ("md_distribute_vertical_bottom", 0xF11CB),
    ("md_distribute_vertical_center", 0xF11CC),
    ("md_distribute_vertical_top", 0xF11CD),
    ("md_diversify", 0xF1877),
    ("md_diving", 0xF1977),
    ("md_diving_flippers", 0xF0DBF),
    ("md_diving_helmet", 0xF0DC0),
    ("md_diving_scuba", 0xF0DC1),
    ("md_diving_scuba_flag", 0xF0DC2),
    ("md_diving_scuba_tank", 0xF0DC3),
    ("md_diving_scuba_tank_multiple", 0xF0DC4),
    ("md_diving_snorkel", 0xF0DC5),
    ("md_division", 0xF01D4),
    ("md_division_box", 0xF01D5),
    ("md_dlna", 0xF0A41),
    ("md_dna", 0xF0684),
    ("md_dns", 0xF01D6),
    ("md_dns_outline", 0xF0B8C),
    ("md_dock_bottom", 0xF10A9),
    ("md_dock_left", 0xF10AA),
    ("md_dock_right", 0xF10AB),
    ("md_dock_top", 0xF1513),
    ("md_dock_window", 0xF10AC),
    ("md_docker", 0xF0868),
    ("md_doctor", 0xF0A42),
    ("md_dog", 0xF0A43),
    ("md_dog_service", 0xF0AAD),
    ("md_dog_side", 0xF0A44),
    ("md_dog_side_off", 0xF16EE),
    ("md_dolby", 0xF06B3),
    ("md_dolly", 0xF0E9E),
    ("md_dolphin", 0xF18B4),
    ("md_domain", 0xF01D7),
    ("md_domain_off", 0xF0D6F),
    ("md_domain_plus", 0xF10AD),
    ("md_domain_remove", 0xF10AE),
    ("md_dome_light", 0xF141E),
    ("md_domino_mask", 0xF1023),
    ("md_donkey", 0xF07C2),
    ("md_door", 0xF081A),
    ("md_door_closed", 0xF081B),
    ("md_door_closed_lock", 0xF10AF),
    ("md_door_open", 0xF081C),
    ("md_door_sliding", 0xF181E),
    ("md_door_sliding_lock", 0xF181F),
    ("md_door_sliding_open", 0xF1820),
    ("md_doorbell", 0xF12E6),
    ("md_doorbell_video", 0xF0869),
    ("md_dot_net", 0xF0AAE),
    ("md_dots_circle", 0xF1978),
    ("md_dots_grid", 0xF15FC),
    ("md_dots_hexagon", 0xF15FF),
    ("md_dots_horizontal", 0xF01D8),
    ("md_dots_horizontal_circle", 0xF07C3),
    ("md_dots_horizontal_circle_outline", 0xF0B8D),
    ("md_dots_square", 0xF15FD),
    ("md_dots_triangle", 0xF15FE),
    ("md_dots_vertical", 0xF01D9),
    ("md_dots_vertical_circle", 0xF07C4),
    ("md_dots_vertical_circle_outline", 0xF0B8E),
    ("md_download", 0xF01DA),
    ("md_download_box", 0xF1462),
    ("md_download_box_outline", 0xF1463),
    ("md_download_circle", 0xF1464),
    ("md_download_circle_outline", 0xF1465),
    ("md_download_lock", 0xF1320),
    ("md_download_lock_outline", 0xF1321),
    ("md_download_multiple", 0xF09E9),
    ("md_download_network", 0xF06F4),
    ("md_download_network_outline", 0xF0C66),
    ("md_download_off", 0xF10B0),
    ("md_download_off_outline", 0xF10B1),
    ("md_download_outline", 0xF0B8F),
    ("md_drag", 0xF01DB),
    ("md_drag_horizontal", 0xF01DC),
    ("md_drag_horizontal_variant", 0xF12F0),
    ("md_drag_variant", 0xF0B90),
    ("md_drag_vertical", 0xF01DD),
    ("md_drag_vertical_variant", 0xF12F1),
    ("md_drama_masks", 0xF0D02),
    ("md_draw", 0xF0F49),
    ("md_draw_pen", 0xF19B9),
    ("md_drawing", 0xF01DE),
    ("md_drawing_box", 0xF01DF),
    ("md_dresser", 0xF0F4A),
    ("md_dresser_outline", 0xF0F4B),
    ("md_drone", 0xF01E2),
    ("md_dropbox", 0xF01E3),
    ("md_drupal", 0xF01E4),
    ("md_duck", 0xF01E5),
    ("md_dumbbell", 0xF01E6),
    ("md_dump_truck", 0xF0C67),
    ("md_ear_hearing", 0xF07C5),
    ("md_ear_hearing_loop", 0xF1AEE),
    ("md_ear_hearing_off", 0xF0A45),
    ("md_earbuds", 0xF184F),
    ("md_earbuds_off", 0xF1850),
    ("md_earbuds_off_outline", 0xF1851),
    ("md_earbuds_outline", 0xF1852),
    ("md_earth", 0xF01E7),
    ("md_earth_arrow_right", 0xF1311),
    ("md_earth_box", 0xF06CD),
    ("md_earth_box_minus", 0xF1407),
    ("md_earth_box_off", 0xF06CE),
    ("md_earth_box_plus", 0xF1406),
    ("md_earth_box_remove", 0xF1408),
    ("md_earth_minus", 0xF1404),
    ("md_earth_off", 0xF01E8),
    ("md_earth_plus", 0xF1403),
    ("md_earth_remove", 0xF1405),
    ("md_egg", 0xF0AAF),
    ("md_egg_easter", 0xF0AB0),
    ("md_egg_fried", 0xF184A),
    ("md_egg_off", 0xF13F0),
    ("md_egg_off_outline", 0xF13F1),
    ("md_egg_outline", 0xF13F2),
    ("md_eiffel_tower", 0xF156B),
    ("md_eight_track", 0xF09EA),
    ("md_eject", 0xF01EA),
    ("md_eject_outline", 0xF0B91),
    ("md_electric_switch", 0xF0E9F),
    ("md_electric_switch_closed", 0xF10D9),
    ("md_electron_framework", 0xF1024),
    ("md_elephant", 0xF07C6),
    ("md_elevation_decline", 0xF01EB),
    ("md_elevation_rise", 0xF01EC),
    ("md_elevator", 0xF01ED),
    ("md_elevator_down", 0xF12C2),
    ("md_elevator_passenger", 0xF1381),
    ("md_elevator_passenger_off", 0xF1979),
    ("md_elevator_passenger_off_outline", 0xF197A),
    ("md_elevator_passenger_outline", 0xF197B),
    ("md_elevator_up", 0xF12C1),
    ("md_ellipse", 0xF0EA0),
    ("md_ellipse_outline", 0xF0EA1),
    ("md_email", 0xF01EE),
    ("md_email_alert", 0xF06CF),
    ("md_email_alert_outline", 0xF0D42),
    ("md_email_box", 0xF0D03),
    ("md_email_check", 0xF0AB1),
    ("md_email_check_outline", 0xF0AB2),
    ("md_email_edit", 0xF0EE3),
    ("md_email_edit_outline", 0xF0EE4),
    ("md_email_fast", 0xF186F),
    ("md_email_fast_outline", 0xF1870),
    ("md_email_lock", 0xF01F1),
    ("md_email_mark_as_unread", 0xF0B92),
    ("md_email_minus", 0xF0EE5),
    ("md_email_minus_outline", 0xF0EE6),
    ("md_email_multiple", 0xF0EE7),
    ("md_email_multiple_outline", 0xF0EE8),
    ("md_email_newsletter", 0xF0FB1),
    ("md_email_off", 0xF13E3),
    ("md_email_off_outline", 0xF13E4),
    ("md_email_open", 0xF01EF),
    ("md_email_open_multiple", 0xF0EE9),
    ("md_email_open_multiple_outline", 0xF0EEA),
    ("md_email_open_outline", 0xF05EF),
    ("md_email_outline", 0xF01F0),
    ("md_email_plus", 0xF09EB),
    ("md_email_plus_outline", 0xF09EC),
    ("md_email_receive", 0xF10DA),
    ("md_email_receive_outline", 0xF10DB),
    ("md_email_remove", 0xF1661),
    ("md_email_remove_outline", 0xF1662),
    ("md_email_seal", 0xF195B),
    ("md_email_seal_outline", 0xF195C),
    ("md_email_search", 0xF0961),
    ("md_email_search_outline", 0xF0962),
    ("md_email_send", 0xF10DC),
    ("md_email_send_outline", 0xF10DD),
    ("md_email_sync", 0xF12C7),
    ("md_email_sync_outline", 0xF12C8),
    ("md_email_variant", 0xF05F0),
    ("md_ember", 0xF0B30),
    ("md_emby", 0xF06B4),
    ("md_emoticon", 0xF0C68),
    ("md_emoticon_angry", 0xF0C69),
    ("md_emoticon_angry_outline", 0xF0C6A),
    ("md_emoticon_confused", 0xF10DE),
    ("md_emoticon_confused_outline", 0xF10DF),
    ("md_emoticon_cool", 0xF0C6B),
    ("md_emoticon_cool_outline", 0xF01F3),
    ("md_emoticon_cry", 0xF0C6C),
    ("md_emoticon_cry_outline", 0xF0C6D),
    ("md_emoticon_dead", 0xF0C6E),
    ("md_emoticon_dead_outline", 0xF069B),
    ("md_emoticon_devil", 0xF0C6F),
    ("md_emoticon_devil_outline", 0xF01F4),
    ("md_emoticon_excited", 0xF0C70),
    ("md_emoticon_excited_outline", 0xF069C),
    ("md_emoticon_frown", 0xF0F4C),
    ("md_emoticon_frown_outline", 0xF0F4D),
    ("md_emoticon_happy", 0xF0C71),
    ("md_emoticon_happy_outline", 0xF01F5),
    ("md_emoticon_kiss", 0xF0C72),
    ("md_emoticon_kiss_outline", 0xF0C73),
    ("md_emoticon_lol", 0xF1214),
    ("md_emoticon_lol_outline", 0xF1215),
    ("md_emoticon_neutral", 0xF0C74),
    ("md_emoticon_neutral_outline", 0xF01F6),
    ("md_emoticon_outline", 0xF01F2),
    ("md_emoticon_poop", 0xF01F7),
    ("md_emoticon_poop_outline", 0xF0C75),
    ("md_emoticon_sad", 0xF0C76),
    ("md_emoticon_sad_outline", 0xF01F8),
    ("md_emoticon_sick", 0xF157C),
    ("md_emoticon_sick_outline", 0xF157D),
    ("md_emoticon_tongue", 0xF01F9),
    ("md_emoticon_tongue_outline", 0xF0C77),
    ("md_emoticon_wink", 0xF0C78),
    ("md_emoticon_wink_outline", 0xF0C79),
    ("md_engine", 0xF01FA),
    ("md_engine_off", 0xF0A46),
    ("md_engine_off_outline", 0xF0A47),
    ("md_engine_outline", 0xF01FB),
    ("md_epsilon", 0xF10E0),
    ("md_equal", 0xF01FC),
    ("md_equal_box", 0xF01FD),
    ("md_equalizer", 0xF0EA2),
    ("md_equalizer_outline", 0xF0EA3),
    ("md_eraser", 0xF01FE),
    ("md_eraser_variant", 0xF0642),
    ("md_escalator", 0xF01FF),
    ("md_escalator_box", 0xF1399),
    ("md_escalator_down", 0xF12C0),
    ("md_escalator_up", 0xF12BF),
    ("md_eslint", 0xF0C7A),
    ("md_et", 0xF0AB3),
    ("md_ethereum", 0xF086A),
    ("md_ethernet", 0xF0200),
    ("md_ethernet_cable", 0xF0201),
    ("md_ethernet_cable_off", 0xF0202),
    ("md_ev_plug_ccs1", 0xF1519),
    ("md_ev_plug_ccs2", 0xF151A),
    ("md_ev_plug_chademo", 0xF151B),
    ("md_ev_plug_tesla", 0xF151C),
    ("md_ev_plug_type1", 0xF151D),
    ("md_ev_plug_type2", 0xF151E),
    ("md_ev_station", 0xF05F1),
    ("md_evernote", 0xF0204),
    ("md_excavator", 0xF1025),
    ("md_exclamation", 0xF0205),
    ("md_exclamation_thick", 0xF1238),
    ("md_exit_run", 0xF0A48),
    ("md_exit_to_app", 0xF0206),
    ("md_expand_all", 0xF0AB4),
    ("md_expand_all_outline", 0xF0AB5),
    ("md_expansion_card", 0xF08AE),
    ("md_expansion_card_variant", 0xF0FB2),
    ("md_exponent", 0xF0963),
    ("md_exponent_box", 0xF0964),
    ("md_export", 0xF0207),
    ("md_export_variant", 0xF0B93),
    ("md_eye", 0xF0208),
    ("md_eye_arrow_left", 0xF18FD),
    ("md_eye_arrow_left_outline", 0xF18FE),
    ("md_eye_arrow_right", 0xF18FF),
    ("md_eye_arrow_right_outline", 0xF1900),
    ("md_eye_check", 0xF0D04),
    ("md_eye_check_outline", 0xF0D05),
    ("md_eye_circle", 0xF0B94),
    ("md_eye_circle_outline", 0xF0B95),
    ("md_eye_minus", 0xF1026),
    ("md_eye_minus_outline", 0xF1027),
    ("md_eye_off", 0xF0209),
    ("md_eye_off_outline", 0xF06D1),
    ("md_eye_outline", 0xF06D0),
    ("md_eye_plus", 0xF086B),
    ("md_eye_plus_outline", 0xF086C),
    ("md_eye_refresh", 0xF197C),
    ("md_eye_refresh_outline", 0xF197D),
    ("md_eye_remove", 0xF15E3),
    ("md_eye_remove_outline", 0xF15E4),
    ("md_eye_settings", 0xF086D),
    ("md_eye_settings_outline", 0xF086E),
    ("md_eyedropper", 0xF020A),
    ("md_eyedropper_minus", 0xF13DD),
    ("md_eyedropper_off", 0xF13DF),
    ("md_eyedropper_plus", 0xF13DC),
    ("md_eyedropper_remove", 0xF13DE),
    ("md_eyedropper_variant", 0xF020B),
    ("md_face_agent", 0xF0D70),
    ("md_face_man", 0xF0643),
    ("md_face_man_outline", 0xF0B96),
    ("md_face_man_profile", 0xF0644),
    ("md_face_man_shimmer", 0xF15CC),
    ("md_face_man_shimmer_outline", 0xF15CD),
    ("md_face_mask", 0xF1586),
    ("md_face_mask_outline", 0xF1587),
    ("md_face_recognition", 0xF0C7B),
    ("md_face_woman", 0xF1077),
    ("md_face_woman_outline", 0xF1078),
    ("md_face_woman_profile", 0xF1076),
    ("md_face_woman_shimmer", 0xF15CE),
    ("md_face_woman_shimmer_outline", 0xF15CF),
    ("md_facebook", 0xF020C),
    ("md_facebook_gaming", 0xF07DD),
    ("md_facebook_messenger", 0xF020E),
    ("md_facebook_workplace", 0xF0B31),
    ("md_factory", 0xF020F),
    ("md_family_tree", 0xF160E),
    ("md_fan", 0xF0210),
    ("md_fan_alert", 0xF146C),
    ("md_fan_auto", 0xF171D),
    ("md_fan_chevron_down", 0xF146D),
    ("md_fan_chevron_up", 0xF146E),
    ("md_fan_clock", 0xF1A3A),
    ("md_fan_minus", 0xF1470),
    ("md_fan_off", 0xF081D),
    ("md_fan_plus", 0xF146F),
    ("md_fan_remove", 0xF1471),
    ("md_fan_speed_1", 0xF1472),
    ("md_fan_speed_2", 0xF1473),
    ("md_fan_speed_3", 0xF1474),
    ("md_fast_forward", 0xF0211),
    ("md_fast_forward_10", 0xF0D71),
    ("md_fast_forward_15", 0xF193A),
    ("md_fast_forward_30", 0xF0D06),
    ("md_fast_forward_5", 0xF11F8),
    ("md_fast_forward_60", 0xF160B),
    ("md_fast_forward_outline", 0xF06D2),
    ("md_fax", 0xF0212),
    ("md_feather", 0xF06D3),
    ("md_feature_search", 0xF0A49),
    ("md_feature_search_outline", 0xF0A4A),
    ("md_fedora", 0xF08DB),
    ("md_fence", 0xF179A),
    ("md_fence_electric", 0xF17F6),
    ("md_fencing", 0xF14C1),
    ("md_ferris_wheel", 0xF0EA4),
    ("md_ferry", 0xF0213),
    ("md_file", 0xF0214),
    ("md_file_account", 0xF073B),
    ("md_file_account_outline", 0xF1028),
    ("md_file_alert", 0xF0A4B),
    ("md_file_alert_outline", 0xF0A4C),
    ("md_file_arrow_left_right", 0xF1A93),
    ("md_file_arrow_left_right_outline", 0xF1A94),
    ("md_file_arrow_up_down", 0xF1A95),
    ("md_file_arrow_up_down_outline", 0xF1A96),
    ("md_file_cabinet", 0xF0AB6),
    ("md_file_cad", 0xF0EEB),
    ("md_file_cad_box", 0xF0EEC),
    ("md_file_cancel", 0xF0DC6),
    ("md_file_cancel_outline", 0xF0DC7),
    ("md_file_certificate", 0xF1186),
    ("md_file_certificate_outline", 0xF1187),
    ("md_file_chart", 0xF0215),
    ("md_file_chart_check", 0xF19C6),
    ("md_file_chart_check_outline", 0xF19C7),
    ("md_file_chart_outline", 0xF1029),
    ("md_file_check", 0xF0216),
    ("md_file_check_outline", 0xF0E29),
    ("md_file_clock", 0xF12E1),
    ("md_file_clock_outline", 0xF12E2),
    ("md_file_cloud", 0xF0217),
    ("md_file_cloud_outline", 0xF102A),
    ("md_file_code", 0xF022E),
    ("md_file_code_outline", 0xF102B),
    ("md_file_cog", 0xF107B),
    ("md_file_cog_outline", 0xF107C),
    ("md_file_compare", 0xF08AA),
    ("md_file_delimited", 0xF0218),
    ("md_file_delimited_outline", 0xF0EA5),
    ("md_file_document", 0xF0219),
    ("md_file_document_alert", 0xF1A97),
    ("md_file_document_alert_outline", 0xF1A98),
    ("md_file_document_check", 0xF1A99),
    ("md_file_document_check_outline", 0xF1A9A),
    ("md_file_document_edit", 0xF0DC8),
    ("md_file_document_edit_outline", 0xF0DC9),
    ("md_file_document_minus", 0xF1A9B),
    ("md_file_document_minus_outline", 0xF1A9C),
    ("md_file_document_multiple", 0xF1517),
    ("md_file_document_multiple_outline", 0xF1518),
    ("md_file_document_outline", 0xF09EE),
    ("md_file_document_plus", 0xF1A9D),
    ("md_file_document_plus_outline", 0xF1A9E),
    ("md_file_document_remove", 0xF1A9F),
    ("md_file_document_remove_outline", 0xF1AA0),
    ("md_file_download", 0xF0965),
    ("md_file_download_outline", 0xF0966),
    ("md_file_edit", 0xF11E7),
    ("md_file_edit_outline", 0xF11E8),
    ("md_file_excel", 0xF021B),
    ("md_file_excel_box", 0xF021C),
    ("md_file_excel_box_outline", 0xF102C),
    ("md_file_excel_outline", 0xF102D),
    ("md_file_export", 0xF021D),
    ("md_file_export_outline", 0xF102E),
    ("md_file_eye", 0xF0DCA),
    ("md_file_eye_outline", 0xF0DCB),
    ("md_file_find", 0xF021E),
    ("md_file_find_outline", 0xF0B97),
    ("md_file_gif_box", 0xF0D78),
    ("md_file_hidden", 0xF0613),
    ("md_file_image", 0xF021F),
    ("md_file_image_marker", 0xF1772),
    ("md_file_image_marker_outline", 0xF1773),
    ("md_file_image_minus", 0xF193B),
    ("md_file_image_minus_outline", 0xF193C),
    ("md_file_image_outline", 0xF0EB0),
    ("md_file_image_plus", 0xF193D),
    ("md_file_image_plus_outline", 0xF193E),
    ("md_file_image_remove", 0xF193F),
    ("md_file_image_remove_outline", 0xF1940),
    ("md_file_import", 0xF0220),
    ("md_file_import_outline", 0xF102F),
    ("md_file_jpg_box", 0xF0225),
    ("md_file_key", 0xF1184),
    ("md_file_key_outline", 0xF1185),
    ("md_file_link", 0xF1177),
    ("md_file_link_outline", 0xF1178),
    ("md_file_lock", 0xF0221),
    ("md_file_lock_open", 0xF19C8),
    ("md_file_lock_open_outline", 0xF19C9),
    ("md_file_lock_outline", 0xF1030),
    ("md_file_marker", 0xF1774),
    ("md_file_marker_outline", 0xF1775),
    ("md_file_minus", 0xF1AA1),
    ("md_file_minus_outline", 0xF1AA2),
    ("md_file_move", 0xF0AB9),
    ("md_file_move_outline", 0xF1031),
    ("md_file_multiple", 0xF0222),
    ("md_file_multiple_outline", 0xF1032),
    ("md_file_music", 0xF0223),
    ("md_file_music_outline", 0xF0E2A),
    ("md_file_outline", 0xF0224),
    ("md_file_pdf_box", 0xF0226),
    ("md_file_percent", 0xF081E),
    ("md_file_percent_outline", 0xF1033),
    ("md_file_phone", 0xF1179),
    ("md_file_phone_outline", 0xF117A),
    ("md_file_plus", 0xF0752),
    ("md_file_plus_outline", 0xF0EED),
    ("md_file_png_box", 0xF0E2D),
    ("md_file_powerpoint", 0xF0227),
    ("md_file_powerpoint_box", 0xF0228),
    ("md_file_powerpoint_box_outline", 0xF1034),
    ("md_file_powerpoint_outline", 0xF1035),
    ("md_file_presentation_box", 0xF0229),
    ("md_file_question", 0xF086F),
    ("md_file_question_outline", 0xF1036),
    ("md_file_refresh", 0xF0918),
    ("md_file_refresh_outline", 0xF0541),
    ("md_file_remove", 0xF0B98),
    ("md_file_remove_outline", 0xF1037),
    ("md_file_replace", 0xF0B32),
    ("md_file_replace_outline", 0xF0B33),
    ("md_file_restore", 0xF0670),
    ("md_file_restore_outline", 0xF1038),
    ("md_file_rotate_left", 0xF1A3B),
    ("md_file_rotate_left_outline", 0xF1A3C),
    ("md_file_rotate_right", 0xF1A3D),
    ("md_file_rotate_right_outline", 0xF1A3E),
    ("md_file_search", 0xF0C7C),
    ("md_file_search_outline", 0xF0C7D),
    ("md_file_send", 0xF022A),
    ("md_file_send_outline", 0xF1039),
    ("md_file_settings", 0xF1079),
    ("md_file_settings_outline", 0xF107A),
    ("md_file_sign", 0xF19C3),
    ("md_file_star", 0xF103A),
    ("md_file_star_outline", 0xF103B),
    ("md_file_swap", 0xF0FB4),
    ("md_file_swap_outline", 0xF0FB5),
    ("md_file_sync", 0xF1216),
    ("md_file_sync_outline", 0xF1217),
    ("md_file_table", 0xF0C7E),
    ("md_file_table_box", 0xF10E1),
    ("md_file_table_box_multiple", 0xF10E2),
    ("md_file_table_box_multiple_outline", 0xF10E3),
    ("md_file_table_box_outline", 0xF10E4),
    ("md_file_table_outline", 0xF0C7F),
    ("md_file_tree", 0xF0645),
    ("md_file_tree_outline", 0xF13D2),
    ("md_file_undo", 0xF08DC),
    ("md_file_undo_outline", 0xF103C),
    ("md_file_upload", 0xF0A4D),
    ("md_file_upload_outline", 0xF0A4E),
    ("md_file_video", 0xF022B),
    ("md_file_video_outline", 0xF0E2C),
    ("md_file_word", 0xF022C),
    ("md_file_word_box", 0xF022D),
    ("md_file_word_box_outline", 0xF103D),
    ("md_file_word_outline", 0xF103E),
    ("md_film", 0xF022F),
    ("md_filmstrip", 0xF0230),
    ("md_filmstrip_box", 0xF0332),
    ("md_filmstrip_box_multiple", 0xF0D18),
    ("md_filmstrip_off", 0xF0231),
    ("md_filter", 0xF0232),
    ("md_filter_check", 0xF18EC),
    ("md_filter_check_outline", 0xF18ED),
    ("md_filter_cog", 0xF1AA3),
    ("md_filter_cog_outline", 0xF1AA4),
    ("md_filter_menu", 0xF10E5),
    ("md_filter_menu_outline", 0xF10E6),
    ("md_filter_minus", 0xF0EEE),
    ("md_filter_minus_outline", 0xF0EEF),
    ("md_filter_multiple", 0xF1A3F),
    ("md_filter_multiple_outline", 0xF1A40),
    ("md_filter_off", 0xF14EF),
    ("md_filter_off_outline", 0xF14F0),
    ("md_filter_outline", 0xF0233),
    ("md_filter_plus", 0xF0EF0),
    ("md_filter_plus_outline", 0xF0EF1),
    ("md_filter_remove", 0xF0234),
    ("md_filter_remove_outline", 0xF0235),
    ("md_filter_settings", 0xF1AA5),
    ("md_filter_settings_outline", 0xF1AA6),
    ("md_filter_variant", 0xF0236),
    ("md_filter_variant_minus", 0xF1112),
    ("md_filter_variant_plus", 0xF1113),
    ("md_filter_variant_remove", 0xF103F),
    ("md_finance", 0xF081F),
    ("md_find_replace", 0xF06D4),
    ("md_fingerprint", 0xF0237),
    ("md_fingerprint_off", 0xF0EB1),
    ("md_fire", 0xF0238),
    ("md_fire_alert", 0xF15D7),
    ("md_fire_circle", 0xF1807),
    ("md_fire_extinguisher", 0xF0EF2),
    ("md_fire_hydrant", 0xF1137),
    ("md_fire_hydrant_alert", 0xF1138),
    ("md_fire_hydrant_off", 0xF1139),
    ("md_fire_off", 0xF1722),
    ("md_fire_truck", 0xF08AB),
    ("md_firebase", 0xF0967),
    ("md_firefox", 0xF0239),
    ("md_fireplace", 0xF0E2E),
    ("md_fireplace_off", 0xF0E2F),
    ("md_firewire", 0xF05BE),
    ("md_firework", 0xF0E30),
    ("md_firework_off", 0xF1723),
    ("md_fish", 0xF023A),
    ("md_fish_off", 0xF13F3),
    ("md_fishbowl", 0xF0EF3),
    ("md_fishbowl_outline", 0xF0EF4),
    ("md_fit_to_page", 0xF0EF5),
    ("md_fit_to_page_outline", 0xF0EF6),
    ("md_fit_to_screen", 0xF18F4),
    ("md_fit_to_screen_outline", 0xF18F5),
    ("md_flag", 0xF023B),
    ("md_flag_checkered", 0xF023C),
    ("md_flag_minus", 0xF0B99),
    ("md_flag_minus_outline", 0xF10B2),
    ("md_flag_off", 0xF18EE),
    ("md_flag_off_outline", 0xF18EF),
    ("md_flag_outline", 0xF023D),
    ("md_flag_plus", 0xF0B9A),
    ("md_flag_plus_outline", 0xF10B3),
    ("md_flag_remove", 0xF0B9B),
    ("md_flag_remove_outline", 0xF10B4),
    ("md_flag_triangle", 0xF023F),
    ("md_flag_variant", 0xF0240),
    ("md_flag_variant_outline", 0xF023E),
    ("md_flare", 0xF0D72),
    ("md_flash", 0xF0241),
    ("md_flash_alert", 0xF0EF7),
    ("md_flash_alert_outline", 0xF0EF8),
    ("md_flash_auto", 0xF0242),
    ("md_flash_off", 0xF0243),
    ("md_flash_outline", 0xF06D5),
    ("md_flash_red_eye", 0xF067B),
    ("md_flashlight", 0xF0244),
    ("md_flashlight_off", 0xF0245),
    ("md_flask", 0xF0093),
    ("md_flask_empty", 0xF0094),
    ("md_flask_empty_minus", 0xF123A),
    ("md_flask_empty_minus_outline", 0xF123B),
    ("md_flask_empty_off", 0xF13F4),
    ("md_flask_empty_off_outline", 0xF13F5),
    ("md_flask_empty_outline", 0xF0095),
    ("md_flask_empty_plus", 0xF123C),
    ("md_flask_empty_plus_outline", 0xF123D),
    ("md_flask_empty_remove", 0xF123E),
    ("md_flask_empty_remove_outline", 0xF123F),
    ("md_flask_minus", 0xF1240),
    ("md_flask_minus_outline", 0xF1241),
    ("md_flask_off", 0xF13F6),
    ("md_flask_off_outline", 0xF13F7),
    ("md_flask_outline", 0xF0096),
    ("md_flask_plus", 0xF1242),
    ("md_flask_plus_outline", 0xF1243),
    ("md_flask_remove", 0xF1244),
    ("md_flask_remove_outline", 0xF1245),
    ("md_flask_round_bottom", 0xF124B),
    ("md_flask_round_bottom_empty", 0xF124C),
    ("md_flask_round_bottom_empty_outline", 0xF124D),
    ("md_flask_round_bottom_outline", 0xF124E),
    ("md_fleur_de_lis", 0xF1303),
    ("md_flip_horizontal", 0xF10E7),
    ("md_flip_to_back", 0xF0247),
    ("md_flip_to_front", 0xF0248),
    ("md_flip_vertical", 0xF10E8),
    ("md_floor_lamp", 0xF08DD),
    ("md_floor_lamp_dual", 0xF1040),
    ("md_floor_lamp_dual_outline", 0xF17CE),
    ("md_floor_lamp_outline", 0xF17C8),
    ("md_floor_lamp_torchiere", 0xF1747),
    ("md_floor_lamp_torchiere_outline", 0xF17D6),
    ("md_floor_lamp_torchiere_variant", 0xF1041),
    ("md_floor_lamp_torchiere_variant_outline", 0xF17CF),
    ("md_floor_plan", 0xF0821),
    ("md_floppy", 0xF0249),
    ("md_floppy_variant", 0xF09EF),
    ("md_flower", 0xF024A),
    ("md_flower_outline", 0xF09F0),
    ("md_flower_pollen", 0xF1885),
    ("md_flower_pollen_outline", 0xF1886),
    ("md_flower_poppy", 0xF0D08),
    ("md_flower_tulip", 0xF09F1),
    ("md_flower_tulip_outline", 0xF09F2),
    ("md_focus_auto", 0xF0F4E),
    ("md_focus_field", 0xF0F4F),
    ("md_focus_field_horizontal", 0xF0F50),
    ("md_focus_field_vertical", 0xF0F51),
    ("md_folder", 0xF024B),
    ("md_folder_account", 0xF024C),
    ("md_folder_account_outline", 0xF0B9C),
    ("md_folder_alert", 0xF0DCC),
    ("md_folder_alert_outline", 0xF0DCD),
    ("md_folder_arrow_down", 0xF19E8),
    ("md_folder_arrow_down_outline", 0xF19E9),
    ("md_folder_arrow_left", 0xF19EA),
    ("md_folder_arrow_left_outline", 0xF19EB),
    ("md_folder_arrow_left_right", 0xF19EC),
    ("md_folder_arrow_left_right_outline", 0xF19ED),
    ("md_folder_arrow_right", 0xF19EE),
    ("md_folder_arrow_right_outline", 0xF19EF),
    ("md_folder_arrow_up", 0xF19F0),
    ("md_folder_arrow_up_down", 0xF19F1),
    ("md_folder_arrow_up_down_outline", 0xF19F2),
    ("md_folder_arrow_up_outline", 0xF19F3),
    ("md_folder_cancel", 0xF19F4),
    ("md_folder_cancel_outline", 0xF19F5),
    ("md_folder_check", 0xF197E),
    ("md_folder_check_outline", 0xF197F),
    ("md_folder_clock", 0xF0ABA),
    ("md_folder_clock_outline", 0xF0ABB),
    ("md_folder_cog", 0xF107F),
    ("md_folder_cog_outline", 0xF1080),
    ("md_folder_download", 0xF024D),
    ("md_folder_download_outline", 0xF10E9),
    ("md_folder_edit", 0xF08DE),
    ("md_folder_edit_outline", 0xF0DCE),
    ("md_folder_eye", 0xF178A),
    ("md_folder_eye_outline", 0xF178B),
    ("md_folder_file", 0xF19F6),
    ("md_folder_file_outline", 0xF19F7),
    ("md_folder_google_drive", 0xF024E),
    ("md_folder_heart", 0xF10EA),
    ("md_folder_heart_outline", 0xF10EB),
    ("md_folder_hidden", 0xF179E),
    ("md_folder_home", 0xF10B5),
    ("md_folder_home_outline", 0xF10B6),
    ("md_folder_image", 0xF024F),
    ("md_folder_information", 0xF10B7),
    ("md_folder_information_outline", 0xF10B8),
    ("md_folder_key", 0xF08AC),
    ("md_folder_key_network", 0xF08AD),
    ("md_folder_key_network_outline", 0xF0C80),
    ("md_folder_key_outline", 0xF10EC),
    ("md_folder_lock", 0xF0250),
    ("md_folder_lock_open", 0xF0251),
    ("md_folder_lock_open_outline", 0xF1AA7),
    ("md_folder_lock_outline", 0xF1AA8),
    ("md_folder_marker", 0xF126D),
    ("md_folder_marker_outline", 0xF126E),
    ("md_folder_move", 0xF0252),
    ("md_folder_move_outline", 0xF1246),
    ("md_folder_multiple", 0xF0253),
    ("md_folder_multiple_image", 0xF0254),
    ("md_folder_multiple_outline", 0xF0255),
    ("md_folder_multiple_plus", 0xF147E),
    ("md_folder_multiple_plus_outline", 0xF147F),
    ("md_folder_music", 0xF1359),
    ("md_folder_music_outline", 0xF135A),
    ("md_folder_network", 0xF0870),
    ("md_folder_network_outline", 0xF0C81),
    ("md_folder_off", 0xF19F8),
    ("md_folder_off_outline", 0xF19F9),
    ("md_folder_open", 0xF0770),
    ("md_folder_open_outline", 0xF0DCF),
    ("md_folder_outline", 0xF0256),
    ("md_folder_play", 0xF19FA),
    ("md_folder_play_outline", 0xF19FB),
    ("md_folder_plus", 0xF0257),
    ("md_folder_plus_outline", 0xF0B9D),
    ("md_folder_pound", 0xF0D09),
    ("md_folder_pound_outline", 0xF0D0A),
    ("md_folder_question", 0xF19CA),
    ("md_folder_question_outline", 0xF19CB),
    ("md_folder_refresh", 0xF0749),
    ("md_folder_refresh_outline", 0xF0542),
    ("md_folder_remove", 0xF0258),
    ("md_folder_remove_outline", 0xF0B9E),
    ("md_folder_search", 0xF0968),
    ("md_folder_search_outline", 0xF0969),
    ("md_folder_settings", 0xF107D),
    ("md_folder_settings_outline", 0xF107E),
    ("md_folder_star", 0xF069D),
    ("md_folder_star_multiple", 0xF13D3),
    ("md_folder_star_multiple_outline", 0xF13D4),
    ("md_folder_star_outline", 0xF0B9F),
    ("md_folder_swap", 0xF0FB6),
    ("md_folder_swap_outline", 0xF0FB7),
    ("md_folder_sync", 0xF0D0B),
    ("md_folder_sync_outline", 0xF0D0C),
    ("md_folder_table", 0xF12E3),
    ("md_folder_table_outline", 0xF12E4),
    ("md_folder_text", 0xF0C82),
    ("md_folder_text_outline", 0xF0C83),
    ("md_folder_upload", 0xF0259),
    ("md_folder_upload_outline", 0xF10ED),
    ("md_folder_wrench", 0xF19FC),
    ("md_folder_wrench_outline", 0xF19FD),
    ("md_folder_zip", 0xF06EB),
    ("md_folder_zip_outline", 0xF07B9),
    ("md_font_awesome", 0xF003A),
    ("md_food", 0xF025A),
    ("md_food_apple", 0xF025B),
    ("md_food_apple_outline", 0xF0C84),
    ("md_food_croissant", 0xF07C8),
    ("md_food_drumstick", 0xF141F),
    ("md_food_drumstick_off", 0xF1468),
    ("md_food_drumstick_off_outline", 0xF1469),
    ("md_food_drumstick_outline", 0xF1420),
    ("md_food_fork_drink", 0xF05F2),
    ("md_food_halal", 0xF1572),
    ("md_food_hot_dog", 0xF184B),
    ("md_food_kosher", 0xF1573),
    ("md_food_off", 0xF05F3),
    ("md_food_off_outline", 0xF1915),
    ("md_food_outline", 0xF1916),
    ("md_food_steak", 0xF146A),
    ("md_food_steak_off", 0xF146B),
    ("md_food_takeout_box", 0xF1836),
    ("md_food_takeout_box_outline", 0xF1837),
    ("md_food_turkey", 0xF171C),
    ("md_food_variant", 0xF025C),
    ("md_food_variant_off", 0xF13E5),
    ("md_foot_print", 0xF0F52),
    ("md_football", 0xF025D),
    ("md_football_australian", 0xF025E),
    ("md_football_helmet", 0xF025F),
    ("md_forest", 0xF1897),
    ("md_forklift", 0xF07C9),
    ("md_form_dropdown", 0xF1400),
    ("md_form_select", 0xF1401),
    ("md_form_textarea", 0xF1095),
    ("md_form_textbox", 0xF060E),
    ("md_form_textbox_lock", 0xF135D),
    ("md_form_textbox_password", 0xF07F5),
    ("md_format_align_bottom", 0xF0753),
    ("md_format_align_center", 0xF0260),
    ("md_format_align_justify", 0xF0261),
    ("md_format_align_left", 0xF0262),
    ("md_format_align_middle", 0xF0754),
    ("md_format_align_right", 0xF0263),
    ("md_format_align_top", 0xF0755),
    ("md_format_annotation_minus", 0xF0ABC),
    ("md_format_annotation_plus", 0xF0646),
    ("md_format_bold", 0xF0264),
    ("md_format_clear", 0xF0265),
    ("md_format_color_fill", 0xF0266),
    ("md_format_color_highlight", 0xF0E31),
    ("md_format_color_marker_cancel", 0xF1313),
    ("md_format_color_text", 0xF069E),
    ("md_format_columns", 0xF08DF),
    ("md_format_float_center", 0xF0267),
    ("md_format_float_left", 0xF0268),
    ("md_format_float_none", 0xF0269),
    ("md_format_float_right", 0xF026A),
    ("md_format_font", 0xF06D6),
    ("md_format_font_size_decrease", 0xF09F3),
    ("md_format_font_size_increase", 0xF09F4),
    ("md_format_header_1", 0xF026B),
    ("md_format_header_2", 0xF026C),
    ("md_format_header_3", 0xF026D),
    ("md_format_header_4", 0xF026E),
    ("md_format_header_5", 0xF026F),
    ("md_format_header_6", 0xF0270),
    ("md_format_header_decrease", 0xF0271),
    ("md_format_header_equal", 0xF0272),
    ("md_format_header_increase", 0xF0273),
    ("md_format_header_pound", 0xF0274),
    ("md_format_horizontal_align_center", 0xF061E),
    ("md_format_horizontal_align_left", 0xF061F),
    ("md_format_horizontal_align_right", 0xF0620),
    ("md_format_indent_decrease", 0xF0275),
    ("md_format_indent_increase", 0xF0276),
    ("md_format_italic", 0xF0277),
    ("md_format_letter_case", 0xF0B34),
    ("md_format_letter_case_lower", 0xF0B35),
    ("md_format_letter_case_upper", 0xF0B36),
    ("md_format_letter_ends_with", 0xF0FB8),
    ("md_format_letter_matches", 0xF0FB9),
    ("md_format_letter_spacing", 0xF1956),
    ("md_format_letter_starts_with", 0xF0FBA),
    ("md_format_line_spacing", 0xF0278),
    ("md_format_line_style", 0xF05C8),
    ("md_format_line_weight", 0xF05C9),
    ("md_format_list_bulleted", 0xF0279),
    ("md_format_list_bulleted_square", 0xF0DD0),
    ("md_format_list_bulleted_triangle", 0xF0EB2),
    ("md_format_list_bulleted_type", 0xF027A),
    ("md_format_list_checkbox", 0xF096A),
    ("md_format_list_checks", 0xF0756),
    ("md_format_list_group", 0xF1860),
    ("md_format_list_numbered", 0xF027B),
    ("md_format_list_numbered_rtl", 0xF0D0D),
    ("md_format_list_text", 0xF126F),
    ("md_format_overline", 0xF0EB3),
    ("md_format_page_break", 0xF06D7),
    ("md_format_page_split", 0xF1917),
    ("md_format_paint", 0xF027C),
    ("md_format_paragraph", 0xF027D),
    ("md_format_pilcrow", 0xF06D8),
    ("md_format_quote_close", 0xF027E),
    ("md_format_quote_close_outline", 0xF11A8),
    ("md_format_quote_open", 0xF0757),
    ("md_format_quote_open_outline", 0xF11A7),
    ("md_format_rotate_90", 0xF06AA),
    ("md_format_section", 0xF069F),
    ("md_format_size", 0xF027F),
    ("md_format_strikethrough", 0xF0280),
    ("md_format_strikethrough_variant", 0xF0281),
    ("md_format_subscript", 0xF0282),
    ("md_format_superscript", 0xF0283),
    ("md_format_text", 0xF0284),
    ("md_format_text_rotation_angle_down", 0xF0FBB),
    ("md_format_text_rotation_angle_up", 0xF0FBC),
    ("md_format_text_rotation_down", 0xF0D73),
    ("md_format_text_rotation_down_vertical", 0xF0FBD),
    ("md_format_text_rotation_none", 0xF0D74),
    ("md_format_text_rotation_up", 0xF0FBE),
    ("md_format_text_rotation_vertical", 0xF0FBF),
    ("md_format_text_variant", 0xF0E32),
    ("md_format_text_variant_outline", 0xF150F),
    ("md_format_text_wrapping_clip", 0xF0D0E),
    ("md_format_text_wrapping_overflow", 0xF0D0F),
    ("md_format_text_wrapping_wrap", 0xF0D10),
    ("md_format_textbox", 0xF0D11),
    ("md_format_textdirection_l_to_r", 0xF0285),
    ("md_format_textdirection_r_to_l", 0xF0286),
    ("md_format_title", 0xF05F4),
    ("md_format_underline", 0xF0287),
    ("md_format_underline_wavy", 0xF18E9),
    ("md_format_vertical_align_bottom", 0xF0621),
    ("md_format_vertical_align_center", 0xF0622),
    ("md_format_vertical_align_top", 0xF0623),
    ("md_format_wrap_inline", 0xF0288),
    ("md_format_wrap_square", 0xF0289),
    ("md_format_wrap_tight", 0xF028A),
    ("md_format_wrap_top_bottom", 0xF028B),
    ("md_forum", 0xF028C),
    ("md_forum_minus", 0xF1AA9),
    ("md_forum_minus_outline", 0xF1AAA),
    ("md_forum_outline", 0xF0822),
    ("md_forum_plus", 0xF1AAB),
    ("md_forum_plus_outline", 0xF1AAC),
    ("md_forum_remove", 0xF1AAD),
    ("md_forum_remove_outline", 0xF1AAE),
    ("md_forward", 0xF028D),
    ("md_forwardburger", 0xF0D75),
    ("md_fountain", 0xF096B),
    ("md_fountain_pen", 0xF0D12),
    ("md_fountain_pen_tip", 0xF0D13),
    ("md_fraction_one_half", 0xF1992),
    ("md_freebsd", 0xF08E0),
    ("md_french_fries", 0xF1957),
    ("md_frequently_asked_questions", 0xF0EB4),
    ("md_fridge", 0xF0290),
    ("md_fridge_alert", 0xF11B1),
    ("md_fridge_alert_outline", 0xF11B2),
    ("md_fridge_bottom", 0xF0292),
    ("md_fridge_industrial", 0xF15EE),
    ("md_fridge_industrial_alert", 0xF15EF),
    ("md_fridge_industrial_alert_outline", 0xF15F0),
    ("md_fridge_industrial_off", 0xF15F1),
    ("md_fridge_industrial_off_outline", 0xF15F2),
    ("md_fridge_industrial_outline", 0xF15F3),
    ("md_fridge_off", 0xF11AF),
    ("md_fridge_off_outline", 0xF11B0),
    ("md_fridge_outline", 0xF028F),
    ("md_fridge_top", 0xF0291),
    ("md_fridge_variant", 0xF15F4),
    ("md_fridge_variant_alert", 0xF15F5),
    ("md_fridge_variant_alert_outline", 0xF15F6),
    ("md_fridge_variant_off", 0xF15F7),
    ("md_fridge_variant_off_outline", 0xF15F8),
    ("md_fridge_variant_outline", 0xF15F9),
    ("md_fruit_cherries", 0xF1042),
    ("md_fruit_cherries_off", 0xF13F8),
    ("md_fruit_citrus", 0xF1043),
    ("md_fruit_citrus_off", 0xF13F9),
    ("md_fruit_grapes", 0xF1044),
    ("md_fruit_grapes_outline", 0xF1045),
    ("md_fruit_pear", 0xF1A0E),
    ("md_fruit_pineapple", 0xF1046),
    ("md_fruit_watermelon", 0xF1047),
    ("md_fuel", 0xF07CA),
    ("md_fuel_cell", 0xF18B5),
    ("md_fullscreen", 0xF0293),
    ("md_fullscreen_exit", 0xF0294),
    ("md_function", 0xF0295),
    ("md_function_variant", 0xF0871),
    ("md_furigana_horizontal", 0xF1081),
    ("md_furigana_vertical", 0xF1082),
    ("md_fuse", 0xF0C85),
    ("md_fuse_alert", 0xF142D),
    ("md_fuse_blade", 0xF0C86),
    ("md_fuse_off", 0xF142C),
    ("md_gamepad", 0xF0296),
    ("md_gamepad_circle", 0xF0E33),
    ("md_gamepad_circle_down", 0xF0E34),
    ("md_gamepad_circle_left", 0xF0E35),
    ("md_gamepad_circle_outline", 0xF0E36),
    ("md_gamepad_circle_right", 0xF0E37),
    ("md_gamepad_circle_up", 0xF0E38),
    ("md_gamepad_down", 0xF0E39),
    ("md_gamepad_left", 0xF0E3A),
    ("md_gamepad_outline", 0xF1919),
    ("md_gamepad_right", 0xF0E3B),
    ("md_gamepad_round", 0xF0E3C),
    ("md_gamepad_round_down", 0xF0E3D),
    ("md_gamepad_round_left", 0xF0E3E),
    ("md_gamepad_round_outline", 0xF0E3F),
    ("md_gamepad_round_right", 0xF0E40),
    ("md_gamepad_round_up", 0xF0E41),
    ("md_gamepad_square", 0xF0EB5),
    ("md_gamepad_square_outline", 0xF0EB6),
    ("md_gamepad_up", 0xF0E42),
    ("md_gamepad_variant", 0xF0297),
    ("md_gamepad_variant_outline", 0xF0EB7),
    ("md_gamma", 0xF10EE),
    ("md_gantry_crane", 0xF0DD1),
    ("md_garage", 0xF06D9),
    ("md_garage_alert", 0xF0872),
    ("md_garage_alert_variant", 0xF12D5),
    ("md_garage_lock", 0xF17FB),
    ("md_garage_open", 0xF06DA),
    ("md_garage_open_variant", 0xF12D4),
    ("md_garage_variant", 0xF12D3),
    ("md_garage_variant_lock", 0xF17FC),
    ("md_gas_burner", 0xF1A1B),
    ("md_gas_cylinder", 0xF0647),
    ("md_gas_station", 0xF0298),
    ("md_gas_station_off", 0xF1409),
    ("md_gas_station_off_outline", 0xF140A),
    ("md_gas_station_outline", 0xF0EB8),
    ("md_gate", 0xF0299),
    ("md_gate_alert", 0xF17F8),
    ("md_gate_and", 0xF08E1),
    ("md_gate_arrow_left", 0xF17F7),
    ("md_gate_arrow_right", 0xF1169),
    ("md_gate_nand", 0xF08E2),
    ("md_gate_nor", 0xF08E3),
    ("md_gate_not", 0xF08E4),
    ("md_gate_open", 0xF116A),
    ("md_gate_or", 0xF08E5),
    ("md_gate_xnor", 0xF08E6),
    ("md_gate_xor", 0xF08E7),
    ("md_gatsby", 0xF0E43),
    ("md_gauge", 0xF029A),
    ("md_gauge_empty", 0xF0873),
    ("md_gauge_full", 0xF0874),
    ("md_gauge_low", 0xF0875),
    ("md_gavel", 0xF029B),
    ("md_gender_female", 0xF029C),
    ("md_gender_male", 0xF029D),
    ("md_gender_male_female", 0xF029E),
    ("md_gender_male_female_variant", 0xF113F),
    ("md_gender_non_binary", 0xF1140),
    ("md_gender_transgender", 0xF029F),
    ("md_gentoo", 0xF08E8),
    ("md_gesture", 0xF07CB),
    ("md_gesture_double_tap", 0xF073C),
    ("md_gesture_pinch", 0xF0ABD),
    ("md_gesture_spread", 0xF0ABE),
    ("md_gesture_swipe", 0xF0D76),
    ("md_gesture_swipe_down", 0xF073D),
    ("md_gesture_swipe_horizontal", 0xF0ABF),
    ("md_gesture_swipe_left", 0xF073E),
    ("md_gesture_swipe_right", 0xF073F),
    ("md_gesture_swipe_up", 0xF0740),
    ("md_gesture_swipe_vertical", 0xF0AC0),
    ("md_gesture_tap", 0xF0741),
    ("md_gesture_tap_box", 0xF12A9),
    ("md_gesture_tap_button", 0xF12A8),
    ("md_gesture_tap_hold", 0xF0D77),
    ("md_gesture_two_double_tap", 0xF0742),
    ("md_gesture_two_tap", 0xF0743),
    ("md_ghost", 0xF02A0),
    ("md_ghost_off", 0xF09F5),
    ("md_ghost_off_outline", 0xF165C),
    ("md_ghost_outline", 0xF165D),
    ("md_gift", 0xF0E44),
    ("md_gift_off", 0xF16EF),
    ("md_gift_off_outline", 0xF16F0),
    ("md_gift_open", 0xF16F1),
    ("md_gift_open_outline", 0xF16F2),
    ("md_gift_outline", 0xF02A1),
    ("md_git", 0xF02A2),
    ("md_github", 0xF02A4),
    ("md_gitlab", 0xF0BA0),
    ("md_glass_cocktail", 0xF0356),
    ("md_glass_cocktail_off", 0xF15E6),
    ("md_glass_flute", 0xF02A5),
    ("md_glass_fragile", 0xF1873),
    ("md_glass_mug", 0xF02A6),
    ("md_glass_mug_off", 0xF15E7),
    ("md_glass_mug_variant", 0xF1116),
    ("md_glass_mug_variant_off", 0xF15E8),
    ("md_glass_pint_outline", 0xF130D),
    ("md_glass_stange", 0xF02A7),
    ("md_glass_tulip", 0xF02A8),
    ("md_glass_wine", 0xF0876),
    ("md_glasses", 0xF02AA),
    ("md_globe_light", 0xF12D7),
    ("md_globe_model", 0xF08E9),
    ("md_gmail", 0xF02AB),
    ("md_gnome", 0xF02AC),
    ("md_go_kart", 0xF0D79),
    ("md_go_kart_track", 0xF0D7A),
    ("md_gog", 0xF0BA1),
    ("md_gold", 0xF124F),
    ("md_golf", 0xF0823),
    ("md_golf_cart", 0xF11A4),
    ("md_golf_tee", 0xF1083),
    ("md_gondola", 0xF0686),
    ("md_goodreads", 0xF0D7B),
    ("md_google", 0xF02AD),
    ("md_google_ads", 0xF0C87),
    ("md_google_analytics", 0xF07CC),
    ("md_google_assistant", 0xF07CD),
    ("md_google_cardboard", 0xF02AE),
    ("md_google_chrome", 0xF02AF),
    ("md_google_circles", 0xF02B0),
    ("md_google_circles_communities", 0xF02B1),
    ("md_google_circles_extended", 0xF02B2),
    ("md_google_circles_group", 0xF02B3),
    ("md_google_classroom", 0xF02C0),
    ("md_google_cloud", 0xF11F6),
    ("md_google_controller", 0xF02B4),
    ("md_google_controller_off", 0xF02B5),
    ("md_google_downasaur", 0xF1362),
    ("md_google_drive", 0xF02B6),
    ("md_google_earth", 0xF02B7),
    ("md_google_fit", 0xF096C),
    ("md_google_glass", 0xF02B8),
    ("md_google_hangouts", 0xF02C9),
    ("md_google_home", 0xF0824),
    ("md_google_keep", 0xF06DC),
    ("md_google_lens", 0xF09F6),
    ("md_google_maps", 0xF05F5),
    ("md_google_my_business", 0xF1048),
    ("md_google_nearby", 0xF02B9),
    ("md_google_play", 0xF02BC),
    ("md_google_plus", 0xF02BD),
    ("md_google_podcast", 0xF0EB9),
    ("md_google_spreadsheet", 0xF09F7),
    ("md_google_street_view", 0xF0C88),
    ("md_google_translate", 0xF02BF),
    ("md_gradient_horizontal", 0xF174A),
    ("md_gradient_vertical", 0xF06A0),
    ("md_grain", 0xF0D7C),
    ("md_graph", 0xF1049),
    ("md_graph_outline", 0xF104A),
    ("md_graphql", 0xF0877),
    ("md_grass", 0xF1510),
    ("md_grave_stone", 0xF0BA2),
    ("md_grease_pencil", 0xF0648),
    ("md_greater_than", 0xF096D),
    ("md_greater_than_or_equal", 0xF096E),
    ("md_greenhouse", 0xF002D),
    ("md_grid", 0xF02C1),
    ("md_grid_large", 0xF0758),
    ("md_grid_off", 0xF02C2),
    ("md_grill", 0xF0E45),
    ("md_grill_outline", 0xF118A),
    ("md_group", 0xF02C3),
    ("md_guitar_acoustic", 0xF0771),
    ("md_guitar_electric", 0xF02C4),
    ("md_guitar_pick", 0xF02C5),
    ("md_guitar_pick_outline", 0xF02C6),
    ("md_guy_fawkes_mask", 0xF0825),
    ("md_gymnastics", 0xF1A41),
    ("md_hail", 0xF0AC1),
    ("md_hair_dryer", 0xF10EF),
    ("md_hair_dryer_outline", 0xF10F0),
    ("md_halloween", 0xF0BA3),
    ("md_hamburger", 0xF0685),
    ("md_hamburger_check", 0xF1776),
    ("md_hamburger_minus", 0xF1777),
    ("md_hamburger_off", 0xF1778),
    ("md_hamburger_plus", 0xF1779),
    ("md_hamburger_remove", 0xF177A),
    ("md_hammer", 0xF08EA),
    ("md_hammer_screwdriver", 0xF1322),
    ("md_hammer_sickle", 0xF1887),
    ("md_hammer_wrench", 0xF1323),
    ("md_hand_back_left", 0xF0E46),
    ("md_hand_back_left_off", 0xF1830),
    ("md_hand_back_left_off_outline", 0xF1832),
    ("md_hand_back_left_outline", 0xF182C),
    ("md_hand_back_right", 0xF0E47),
    ("md_hand_back_right_off", 0xF1831),
    ("md_hand_back_right_off_outline", 0xF1833),
    ("md_hand_back_right_outline", 0xF182D),
    ("md_hand_clap", 0xF194B),
    ("md_hand_clap_off", 0xF1A42),
    ("md_hand_coin", 0xF188F),
    ("md_hand_coin_outline", 0xF1890),
    ("md_hand_extended", 0xF18B6),
    ("md_hand_extended_outline", 0xF18B7),
    ("md_hand_front_left", 0xF182B),
    ("md_hand_front_left_outline", 0xF182E),
    ("md_hand_front_right", 0xF0A4F),
    ("md_hand_front_right_outline", 0xF182F),
    ("md_hand_heart", 0xF10F1),
    ("md_hand_heart_outline", 0xF157E),
    ("md_hand_okay", 0xF0A50),
    ("md_hand_peace", 0xF0A51),
    ("md_hand_peace_variant", 0xF0A52),
    ("md_hand_pointing_down", 0xF0A53),
    ("md_hand_pointing_left", 0xF0A54),
    ("md_hand_pointing_right", 0xF02C7),
    ("md_hand_pointing_up", 0xF0A55),
    ("md_hand_saw", 0xF0E48),
    ("md_hand_wash", 0xF157F),
    ("md_hand_wash_outline", 0xF1580),
    ("md_hand_water", 0xF139F),
    ("md_hand_wave", 0xF1821),
    ("md_hand_wave_outline", 0xF1822),
    ("md_handball", 0xF0F53),
    ("md_handcuffs", 0xF113E),
    ("md_hands_pray", 0xF0579),
    ("md_handshake", 0xF1218),
    ("md_handshake_outline", 0xF15A1),
    ("md_hanger", 0xF02C8),
    ("md_hard_hat", 0xF096F),
    ("md_harddisk", 0xF02CA),
    ("md_harddisk_plus", 0xF104B),
    ("md_harddisk_remove", 0xF104C),
    ("md_hat_fedora", 0xF0BA4),
    ("md_hazard_lights", 0xF0C89),
    ("md_hdr", 0xF0D7D),
    ("md_hdr_off", 0xF0D7E),
    ("md_head", 0xF135E),
    ("md_head_alert", 0xF1338),
    ("md_head_alert_outline", 0xF1339),
    ("md_head_check", 0xF133A),
    ("md_head_check_outline", 0xF133B),
    ("md_head_cog", 0xF133C),
    ("md_head_cog_outline", 0xF133D),
    ("md_head_dots_horizontal", 0xF133E),
    ("md_head_dots_horizontal_outline", 0xF133F),
    ("md_head_flash", 0xF1340),
    ("md_head_flash_outline", 0xF1341),
    ("md_head_heart", 0xF1342),
    ("md_head_heart_outline", 0xF1343),
    ("md_head_lightbulb", 0xF1344),
    ("md_head_lightbulb_outline", 0xF1345),
    ("md_head_minus", 0xF1346),
    ("md_head_minus_outline", 0xF1347),
    ("md_head_outline", 0xF135F),
    ("md_head_plus", 0xF1348),
    ("md_head_plus_outline", 0xF1349),
    ("md_head_question", 0xF134A),
    ("md_head_question_outline", 0xF134B),
    ("md_head_remove", 0xF134C),
    ("md_head_remove_outline", 0xF134D),
    ("md_head_snowflake", 0xF134E),
    ("md_head_snowflake_outline", 0xF134F),
    ("md_head_sync", 0xF1350),
    ("md_head_sync_outline", 0xF1351),
    ("md_headphones", 0xF02CB),
    ("md_headphones_bluetooth", 0xF0970),
    ("md_headphones_box", 0xF02CC),
    ("md_headphones_off", 0xF07CE),
    ("md_headphones_settings", 0xF02CD),
    ("md_headset", 0xF02CE),
    ("md_headset_dock", 0xF02CF),
    ("md_headset_off", 0xF02D0),
    ("md_heart", 0xF02D1),
    ("md_heart_box", 0xF02D2),
    ("md_heart_box_outline", 0xF02D3),
    ("md_heart_broken", 0xF02D4),
    ("md_heart_broken_outline", 0xF0D14),
    ("md_heart_circle", 0xF0971),
    ("md_heart_circle_outline", 0xF0972),
    ("md_heart_cog", 0xF1663),
    ("md_heart_cog_outline", 0xF1664),
    ("md_heart_flash", 0xF0EF9),
    ("md_heart_half", 0xF06DF),
    ("md_heart_half_full", 0xF06DE),
    ("md_heart_half_outline", 0xF06E0),
    ("md_heart_minus", 0xF142F),
    ("md_heart_minus_outline", 0xF1432),
    ("md_heart_multiple", 0xF0A56),
    ("md_heart_multiple_outline", 0xF0A57),
    ("md_heart_off", 0xF0759),
    ("md_heart_off_outline", 0xF1434),
    ("md_heart_outline", 0xF02D5),
    ("md_heart_plus", 0xF142E),
    ("md_heart_plus_outline", 0xF1431),
    ("md_heart_pulse", 0xF05F6),
    ("md_heart_remove", 0xF1430),
    ("md_heart_remove_outline", 0xF1433),
    ("md_heart_settings", 0xF1665),
    ("md_heart_settings_outline", 0xF1666),
    ("md_heat_pump", 0xF1A43),
    ("md_heat_pump_outline", 0xF1A44),
    ("md_heat_wave", 0xF1A45),
    ("md_heating_coil", 0xF1AAF),
    ("md_helicopter", 0xF0AC2),
    ("md_help", 0xF02D6),
    ("md_help_box", 0xF078B),
    ("md_help_circle", 0xF02D7),
    ("md_help_circle_outline", 0xF0625),
    ("md_help_network", 0xF06F5),
    ("md_help_network_outline", 0xF0C8A),
    ("md_help_rhombus", 0xF0BA5),
    ("md_help_rhombus_outline", 0xF0BA6),
    ("md_hexadecimal", 0xF12A7),
    ("md_hexagon", 0xF02D8),
    ("md_hexagon_multiple", 0xF06E1),
    ("md_hexagon_multiple_outline", 0xF10F2),
    ("md_hexagon_outline", 0xF02D9),
    ("md_hexagon_slice_1", 0xF0AC3),
    ("md_hexagon_slice_2", 0xF0AC4),
    ("md_hexagon_slice_3", 0xF0AC5),
    ("md_hexagon_slice_4", 0xF0AC6),
    ("md_hexagon_slice_5", 0xF0AC7),
    ("md_hexagon_slice_6", 0xF0AC8),
    ("md_hexagram", 0xF0AC9),
    ("md_hexagram_outline", 0xF0ACA),
    ("md_high_definition", 0xF07CF),
    ("md_high_definition_box", 0xF0878),
    ("md_highway", 0xF05F7),
    ("md_hiking", 0xF0D7F),
    ("md_history", 0xF02DA),
    ("md_hockey_puck", 0xF0879),
    ("md_hockey_sticks", 0xF087A),
    ("md_hololens", 0xF02DB),
    ("md_home", 0xF02DC),
    ("md_home_account", 0xF0826),
    ("md_home_alert", 0xF087B),
    ("md_home_alert_outline", 0xF15D0),
    ("md_home_analytics", 0xF0EBA),
    ("md_home_assistant", 0xF07D0),
    ("md_home_automation", 0xF07D1),
    ("md_home_battery", 0xF1901),
    ("md_home_battery_outline", 0xF1902),
    ("md_home_circle", 0xF07D2),
    ("md_home_circle_outline", 0xF104D),
    ("md_home_city", 0xF0D15),
    ("md_home_city_outline", 0xF0D16),
    ("md_home_clock", 0xF1A12),
    ("md_home_clock_outline", 0xF1A13),
    ("md_home_edit", 0xF1159),
    ("md_home_edit_outline", 0xF115A),
    ("md_home_export_outline", 0xF0F9B),
    ("md_home_flood", 0xF0EFA),
    ("md_home_floor_0", 0xF0DD2),
    ("md_home_floor_1", 0xF0D80),
    ("md_home_floor_2", 0xF0D81),
    ("md_home_floor_3", 0xF0D82),
    ("md_home_floor_a", 0xF0D83),
    ("md_home_floor_b", 0xF0D84),
    ("md_home_floor_g", 0xF0D85),
    ("md_home_floor_l", 0xF0D86),
    ("md_home_floor_negative_1", 0xF0DD3),
    ("md_home_group", 0xF0DD4),
    ("md_home_group_minus", 0xF19C1),
    ("md_home_group_plus", 0xF19C0),
    ("md_home_group_remove", 0xF19C2),
    ("md_home_heart", 0xF0827),
    ("md_home_import_outline", 0xF0F9C),
    ("md_home_lightbulb", 0xF1251),
    ("md_home_lightbulb_outline", 0xF1252),
    ("md_home_lightning_bolt", 0xF1903),
    ("md_home_lightning_bolt_outline", 0xF1904),
    ("md_home_lock", 0xF08EB),
    ("md_home_lock_open", 0xF08EC),
    ("md_home_map_marker", 0xF05F8),
    ("md_home_minus", 0xF0974),
    ("md_home_minus_outline", 0xF13D5),
    ("md_home_modern", 0xF02DD),
    ("md_home_off", 0xF1A46),
    ("md_home_off_outline", 0xF1A47),
    ("md_home_outline", 0xF06A1),
    ("md_home_plus", 0xF0975),
    ("md_home_plus_outline", 0xF13D6),
    ("md_home_remove", 0xF1247),
    ("md_home_remove_outline", 0xF13D7),
    ("md_home_roof", 0xF112B),
    ("md_home_search", 0xF13B0),
    ("md_home_search_outline", 0xF13B1),
    ("md_home_switch", 0xF1794),
    ("md_home_switch_outline", 0xF1795),
    ("md_home_thermometer", 0xF0F54),
    ("md_home_thermometer_outline", 0xF0F55),
    ("md_home_variant", 0xF02DE),
    ("md_home_variant_outline", 0xF0BA7),
    ("md_hook", 0xF06E2),
    ("md_hook_off", 0xF06E3),
    ("md_hoop_house", 0xF0E56),
    ("md_hops", 0xF02DF),
    ("md_horizontal_rotate_clockwise", 0xF10F3),
    ("md_horizontal_rotate_counterclockwise", 0xF10F4),
    ("md_horse", 0xF15BF),
    ("md_horse_human", 0xF15C0),
    ("md_horse_variant", 0xF15C1),
    ("md_horse_variant_fast", 0xF186E),
    ("md_horseshoe", 0xF0A58),
    ("md_hospital", 0xF0FF6),
    ("md_hospital_box", 0xF02E0),
    ("md_hospital_box_outline", 0xF0FF7),
    ("md_hospital_building", 0xF02E1),
    ("md_hospital_marker", 0xF02E2),
    ("md_hot_tub", 0xF0828),
    ("md_hours_24", 0xF1478),
    ("md_hubspot", 0xF0D17),
    ("md_hulu", 0xF0829),
    ("md_human", 0xF02E6),
    ("md_human_baby_changing_table", 0xF138B),
    ("md_human_cane", 0xF1581),
    ("md_human_capacity_decrease", 0xF159B),
    ("md_human_capacity_increase", 0xF159C),
    ("md_human_child", 0xF02E7),
    ("md_human_dolly", 0xF1980),
    ("md_human_edit", 0xF14E8),
    ("md_human_female", 0xF0649),
    ("md_human_female_boy", 0xF0A59),
    ("md_human_female_dance", 0xF15C9),
    ("md_human_female_female", 0xF0A5A),
    ("md_human_female_girl", 0xF0A5B),
    ("md_human_greeting", 0xF17C4),
    ("md_human_greeting_proximity", 0xF159D),
    ("md_human_greeting_variant", 0xF064A),
    ("md_human_handsdown", 0xF064B),
    ("md_human_handsup", 0xF064C),
    ("md_human_male", 0xF064D),
    ("md_human_male_board", 0xF0890),
    ("md_human_male_board_poll", 0xF0846),
    ("md_human_male_boy", 0xF0A5C),
    ("md_human_male_child", 0xF138C),
    ("md_human_male_female", 0xF02E8),
    ("md_human_male_female_child", 0xF1823),
    ("md_human_male_girl", 0xF0A5D),
    ("md_human_male_height", 0xF0EFB),
    ("md_human_male_height_variant", 0xF0EFC),
    ("md_human_male_male", 0xF0A5E),
    ("md_human_non_binary", 0xF1848),
    ("md_human_pregnant", 0xF05CF),
    ("md_human_queue", 0xF1571),
    ("md_human_scooter", 0xF11E9),
    ("md_human_wheelchair", 0xF138D),
    ("md_human_white_cane", 0xF1981),
    ("md_humble_bundle", 0xF0744),
    ("md_hvac", 0xF1352),
    ("md_hvac_off", 0xF159E),
    ("md_hydraulic_oil_level", 0xF1324),
    ("md_hydraulic_oil_temperature", 0xF1325),
    ("md_hydro_power", 0xF12E5),
    ("md_hydrogen_station", 0xF1894),
    ("md_ice_cream", 0xF082A),
    ("md_ice_cream_off", 0xF0E52),
    ("md_ice_pop", 0xF0EFD),
    ("md_id_card", 0xF0FC0),
    ("md_identifier", 0xF0EFE),
    ("md_ideogram_cjk", 0xF1331),
    ("md_ideogram_cjk_variant", 0xF1332),
    ("md_image", 0xF02E9),
    ("md_image_album", 0xF02EA),
    ("md_image_area", 0xF02EB),
    ("md_image_area_close", 0xF02EC),
    ("md_image_auto_adjust", 0xF0FC1),
    ("md_image_broken", 0xF02ED),
    ("md_image_broken_variant", 0xF02EE),
    ("md_image_edit", 0xF11E3),
    ("md_image_edit_outline", 0xF11E4),
    ("md_image_filter_black_white", 0xF02F0),
    ("md_image_filter_center_focus", 0xF02F1),
    ("md_image_filter_center_focus_strong", 0xF0EFF),
    ("md_image_filter_center_focus_strong_outline", 0xF0F00),
    ("md_image_filter_center_focus_weak", 0xF02F2),
    ("md_image_filter_drama", 0xF02F3),
    ("md_image_filter_frames", 0xF02F4),
    ("md_image_filter_hdr", 0xF02F5),
    ("md_image_filter_none", 0xF02F6),
    ("md_image_filter_tilt_shift", 0xF02F7),
    ("md_image_filter_vintage", 0xF02F8),
    ("md_image_frame", 0xF0E49),
    ("md_image_lock", 0xF1AB0),
    ("md_image_lock_outline", 0xF1AB1),
    ("md_image_marker", 0xF177B),
    ("md_image_marker_outline", 0xF177C),
    ("md_image_minus", 0xF1419),
    ("md_image_move", 0xF09F8),
    ("md_image_multiple", 0xF02F9),
    ("md_image_multiple_outline", 0xF02EF),
    ("md_image_off", 0xF082B),
    ("md_image_off_outline", 0xF11D1),
    ("md_image_outline", 0xF0976),
    ("md_image_plus", 0xF087C),
    ("md_image_refresh", 0xF19FE),
    ("md_image_refresh_outline", 0xF19FF),
    ("md_image_remove", 0xF1418),
    ("md_image_search", 0xF0977),
    ("md_image_search_outline", 0xF0978),
    ("md_image_size_select_actual", 0xF0C8D),
    ("md_image_size_select_large", 0xF0C8E),
    ("md_image_size_select_small", 0xF0C8F),
    ("md_image_sync", 0xF1A00),
    ("md_image_sync_outline", 0xF1A01),
    ("md_image_text", 0xF160D),
    ("md_import", 0xF02FA),
    ("md_inbox", 0xF0687),
    ("md_inbox_arrow_down", 0xF02FB),
    ("md_inbox_arrow_down_outline", 0xF1270),
    ("md_inbox_arrow_up", 0xF03D1),
    ("md_inbox_arrow_up_outline", 0xF1271),
    ("md_inbox_full", 0xF1272),
    ("md_inbox_full_outline", 0xF1273),
    ("md_inbox_multiple", 0xF08B0),
    ("md_inbox_multiple_outline", 0xF0BA8),
    ("md_inbox_outline", 0xF1274),
    ("md_inbox_remove", 0xF159F),
    ("md_inbox_remove_outline", 0xF15A0),
    ("md_incognito", 0xF05F9),
    ("md_incognito_circle", 0xF1421),
    ("md_incognito_circle_off", 0xF1422),
    ("md_incognito_off", 0xF0075),
    ("md_induction", 0xF184C),
    ("md_infinity", 0xF06E4),
    ("md_information", 0xF02FC),
    ("md_information_off", 0xF178C),
    ("md_information_off_outline", 0xF178D),
    ("md_information_outline", 0xF02FD),
    ("md_information_variant", 0xF064E),
    ("md_instagram", 0xF02FE),
    ("md_instrument_triangle", 0xF104E),
    ("md_integrated_circuit_chip", 0xF1913),
    ("md_invert_colors", 0xF0301),
    ("md_invert_colors_off", 0xF0E4A),
    ("md_iobroker", 0xF12E8),
    ("md_ip", 0xF0A5F),
    ("md_ip_network", 0xF0A60),
    ("md_ip_network_outline", 0xF0C90),
    ("md_ip_outline", 0xF1982),
    ("md_ipod", 0xF0C91),
    ("md_iron", 0xF1824),
    ("md_iron_board", 0xF1838),
    ("md_iron_outline", 0xF1825),
    ("md_island", 0xF104F),
    ("md_iv_bag", 0xF10B9),
    ("md_jabber", 0xF0DD5),
    ("md_jeepney", 0xF0302),
    ("md_jellyfish", 0xF0F01),
    ("md_jellyfish_outline", 0xF0F02),
    ("md_jira", 0xF0303),
    ("md_jquery", 0xF087D),
    ("md_jsfiddle", 0xF0304),
    ("md_jump_rope", 0xF12FF),
    ("md_kabaddi", 0xF0D87),
    ("md_kangaroo", 0xF1558),
    ("md_karate", 0xF082C),
    ("md_kayaking", 0xF08AF),
    ("md_keg", 0xF0305),
    ("md_kettle", 0xF05FA),
    ("md_kettle_alert", 0xF1317),
    ("md_kettle_alert_outline", 0xF1318),
    ("md_kettle_off", 0xF131B),
    ("md_kettle_off_outline", 0xF131C),
    ("md_kettle_outline", 0xF0F56),
    ("md_kettle_pour_over", 0xF173C),
    ("md_kettle_steam", 0xF1319),
    ("md_kettle_steam_outline", 0xF131A),
    ("md_kettlebell", 0xF1300),
    ("md_key", 0xF0306),
    ("md_key_alert", 0xF1983),
    ("md_key_alert_outline", 0xF1984),
    ("md_key_arrow_right", 0xF1312),
    ("md_key_chain", 0xF1574),
    ("md_key_chain_variant", 0xF1575),
    ("md_key_change", 0xF0307),
    ("md_key_link", 0xF119F),
    ("md_key_minus", 0xF0308),
    ("md_key_outline", 0xF0DD6),
    ("md_key_plus", 0xF0309),
    ("md_key_remove", 0xF030A),
    ("md_key_star", 0xF119E),
    ("md_key_variant", 0xF030B),
    ("md_key_wireless", 0xF0FC2),
    ("md_keyboard", 0xF030C),
    ("md_keyboard_backspace", 0xF030D),
    ("md_keyboard_caps", 0xF030E),
    ("md_keyboard_close", 0xF030F),
    ("md_keyboard_esc", 0xF12B7),
    ("md_keyboard_f1", 0xF12AB),
    ("md_keyboard_f10", 0xF12B4),
    ("md_keyboard_f11", 0xF12B5),
    ("md_keyboard_f12", 0xF12B6),
    ("md_keyboard_f2", 0xF12AC),
    ("md_keyboard_f3", 0xF12AD),
    ("md_keyboard_f4", 0xF12AE),
    ("md_keyboard_f5", 0xF12AF),
    ("md_keyboard_f6", 0xF12B0),
    ("md_keyboard_f7", 0xF12B1),
    ("md_keyboard_f8", 0xF12B2),
    ("md_keyboard_f9", 0xF12B3),
    ("md_keyboard_off", 0xF0310),
    ("md_keyboard_off_outline", 0xF0E4B),
    ("md_keyboard_outline", 0xF097B),
    ("md_keyboard_return", 0xF0311),
    ("md_keyboard_settings", 0xF09F9),
    ("md_keyboard_settings_outline", 0xF09FA),
    ("md_keyboard_space", 0xF1050),
    ("md_keyboard_tab", 0xF0312),
    ("md_keyboard_tab_reverse", 0xF0325),
    ("md_keyboard_variant", 0xF0313),
    ("md_khanda", 0xF10FD),
    ("md_kickstarter", 0xF0745),
    ("md_kite", 0xF1985),
    ("md_kite_outline", 0xF1986),
    ("md_kitesurfing", 0xF1744),
    ("md_klingon", 0xF135B),
    ("md_knife", 0xF09FB),
    ("md_knife_military", 0xF09FC),
    ("md_koala", 0xF173F),
    ("md_kodi", 0xF0314),
    ("md_kubernetes", 0xF10FE),
    ("md_label", 0xF0315),
    ("md_label_multiple", 0xF1375),
    ("md_label_multiple_outline", 0xF1376),
    ("md_label_off", 0xF0ACB),
    ("md_label_off_outline", 0xF0ACC),
    ("md_label_outline", 0xF0316),
    ("md_label_percent", 0xF12EA),
    ("md_label_percent_outline", 0xF12EB),
    ("md_label_variant", 0xF0ACD),
    ("md_label_variant_outline", 0xF0ACE),
    ("md_ladder", 0xF15A2),
    ("md_ladybug", 0xF082D),
    ("md_lambda", 0xF0627),
    ("md_lamp", 0xF06B5),
    ("md_lamp_outline", 0xF17D0),
    ("md_lamps", 0xF1576),
    ("md_lamps_outline", 0xF17D1),
    ("md_lan", 0xF0317),
    ("md_lan_check", 0xF12AA),
    ("md_lan_connect", 0xF0318),
    ("md_lan_disconnect", 0xF0319),
    ("md_lan_pending", 0xF031A),
    ("md_land_fields", 0xF1AB2),
    ("md_land_plots", 0xF1AB3),
    ("md_land_plots_circle", 0xF1AB4),
    ("md_land_plots_circle_variant", 0xF1AB5),
    ("md_land_rows_horizontal", 0xF1AB6),
    ("md_land_rows_vertical", 0xF1AB7),
    ("md_landslide", 0xF1A48),
    ("md_landslide_outline", 0xF1A49),
    ("md_language_c", 0xF0671),
    ("md_language_cpp", 0xF0672),
    ("md_language_csharp", 0xF031B),
    ("md_language_css3", 0xF031C),
    ("md_language_fortran", 0xF121A),
    ("md_language_go", 0xF07D3),
    ("md_language_haskell", 0xF0C92),
    ("md_language_html5", 0xF031D),
    ("md_language_java", 0xF0B37),
    ("md_language_javascript", 0xF031E),
    ("md_language_kotlin", 0xF1219),
    ("md_language_lua", 0xF08B1),
    ("md_language_markdown", 0xF0354),
    ("md_language_markdown_outline", 0xF0F5B),
    ("md_language_php", 0xF031F),
    ("md_language_python", 0xF0320),
    ("md_language_r", 0xF07D4),
    ("md_language_ruby", 0xF0D2D),
    ("md_language_ruby_on_rails", 0xF0ACF),
    ("md_language_rust", 0xF1617),
    ("md_language_swift", 0xF06E5),
    ("md_language_typescript", 0xF06E6),
    ("md_language_xaml", 0xF0673),
    ("md_laptop", 0xF0322),
    ("md_laptop_account", 0xF1A4A),
    ("md_laptop_off", 0xF06E7),
    ("md_laravel", 0xF0AD0),
    ("md_laser_pointer", 0xF1484),
    ("md_lasso", 0xF0F03),
    ("md_lastpass", 0xF0446),
    ("md_latitude", 0xF0F57),
    ("md_launch", 0xF0327),
    ("md_lava_lamp", 0xF07D5),
    ("md_layers", 0xF0328),
    ("md_layers_edit", 0xF1892),
    ("md_layers_minus", 0xF0E4C),
    ("md_layers_off", 0xF0329),
    ("md_layers_off_outline", 0xF09FD),
    ("md_layers_outline", 0xF09FE),
    ("md_layers_plus", 0xF0E4D),
    ("md_layers_remove", 0xF0E4E),
    ("md_layers_search", 0xF1206),
    ("md_layers_search_outline", 0xF1207),
    ("md_layers_triple", 0xF0F58),
    ("md_layers_triple_outline", 0xF0F59),
    ("md_lead_pencil", 0xF064F),
    ("md_leaf", 0xF032A),
    ("md_leaf_circle", 0xF1905),
    ("md_leaf_circle_outline", 0xF1906),
    ("md_leaf_maple", 0xF0C93),
    ("md_leaf_maple_off", 0xF12DA),
    ("md_leaf_off", 0xF12D9),
    ("md_leak", 0xF0DD7),
    ("md_leak_off", 0xF0DD8),
    ("md_lecturn", 0xF1AF0),
    ("md_led_off", 0xF032B),
    ("md_led_on", 0xF032C),
    ("md_led_outline", 0xF032D),
    ("md_led_strip", 0xF07D6),
    ("md_led_strip_variant", 0xF1051),
    ("md_led_strip_variant_off", 0xF1A4B),
    ("md_led_variant_off", 0xF032E),
    ("md_led_variant_on", 0xF032F),
    ("md_led_variant_outline", 0xF0330),
    ("md_leek", 0xF117D),
    ("md_less_than", 0xF097C),
    ("md_less_than_or_equal", 0xF097D),
    ("md_library", 0xF0331),
    ("md_library_outline", 0xF1A22),
    ("md_library_shelves", 0xF0BA9),
    ("md_license", 0xF0FC3),
    ("md_lifebuoy", 0xF087E),
    ("md_light_flood_down", 0xF1987),
    ("md_light_flood_up", 0xF1988),
    ("md_light_recessed", 0xF179B),
    ("md_light_switch", 0xF097E),
    ("md_light_switch_off", 0xF1A24),
    ("md_lightbulb", 0xF0335),
    ("md_lightbulb_alert", 0xF19E1),
    ("md_lightbulb_alert_outline", 0xF19E2),
    ("md_lightbulb_auto", 0xF1800),
    ("md_lightbulb_auto_outline", 0xF1801),
    ("md_lightbulb_cfl", 0xF1208),
    ("md_lightbulb_cfl_off", 0xF1209),
    ("md_lightbulb_cfl_spiral", 0xF1275),
    ("md_lightbulb_cfl_spiral_off", 0xF12C3),
    ("md_lightbulb_fluorescent_tube", 0xF1804),
    ("md_lightbulb_fluorescent_tube_outline", 0xF1805),
    ("md_lightbulb_group", 0xF1253),
    ("md_lightbulb_group_off", 0xF12CD),
    ("md_lightbulb_group_off_outline", 0xF12CE),
    ("md_lightbulb_group_outline", 0xF1254),
    ("md_lightbulb_multiple", 0xF1255),
    ("md_lightbulb_multiple_off", 0xF12CF),
    ("md_lightbulb_multiple_off_outline", 0xF12D0),
    ("md_lightbulb_multiple_outline", 0xF1256),
    ("md_lightbulb_night", 0xF1A4C),
    ("md_lightbulb_night_outline", 0xF1A4D),
    ("md_lightbulb_off", 0xF0E4F),
    ("md_lightbulb_off_outline", 0xF0E50),
    ("md_lightbulb_on", 0xF06E8),
    ("md_lightbulb_on_10", 0xF1A4E),
    ("md_lightbulb_on_20", 0xF1A4F),
    ("md_lightbulb_on_30", 0xF1A50),
    ("md_lightbulb_on_40", 0xF1A51),
    ("md_lightbulb_on_50", 0xF1A52),
    ("md_lightbulb_on_60", 0xF1A53),
    ("md_lightbulb_on_70", 0xF1A54),
    ("md_lightbulb_on_80", 0xF1A55),
    ("md_lightbulb_on_90", 0xF1A56),
    ("md_lightbulb_on_outline", 0xF06E9),
    ("md_lightbulb_outline", 0xF0336),
    ("md_lightbulb_question", 0xF19E3),
    ("md_lightbulb_question_outline", 0xF19E4),
    ("md_lightbulb_spot", 0xF17F4),
    ("md_lightbulb_spot_off", 0xF17F5),
    ("md_lightbulb_variant", 0xF1802),
    ("md_lightbulb_variant_outline", 0xF1803),
    ("md_lighthouse", 0xF09FF),
    ("md_lighthouse_on", 0xF0A00),
    ("md_lightning_bolt", 0xF140B),
    ("md_lightning_bolt_circle", 0xF0820),
    ("md_lightning_bolt_outline", 0xF140C),
    ("md_line_scan", 0xF0624),
    ("md_lingerie", 0xF1476),
    ("md_link", 0xF0337),
    ("md_link_box", 0xF0D1A),
    ("md_link_box_outline", 0xF0D1B),
    ("md_link_box_variant", 0xF0D1C),
    ("md_link_box_variant_outline", 0xF0D1D),
    ("md_link_lock", 0xF10BA),
    ("md_link_off", 0xF0338),
    ("md_link_plus", 0xF0C94),
    ("md_link_variant", 0xF0339),
    ("md_link_variant_minus", 0xF10FF),
    ("md_link_variant_off", 0xF033A),
    ("md_link_variant_plus", 0xF1100),
    ("md_link_variant_remove", 0xF1101),
    ("md_linkedin", 0xF033B),
    ("md_linux", 0xF033D),
    ("md_linux_mint", 0xF08ED),
    ("md_lipstick", 0xF13B5),
    ("md_liquid_spot", 0xF1826),
    ("md_liquor", 0xF191E),
    ("md_list_status", 0xF15AB),
    ("md_litecoin", 0xF0A61),
    ("md_loading", 0xF0772),
    ("md_location_enter", 0xF0FC4),
    ("md_location_exit", 0xF0FC5),
    ("md_lock", 0xF033E),
    ("md_lock_alert", 0xF08EE),
    ("md_lock_alert_outline", 0xF15D1),
    ("md_lock_check", 0xF139A),
    ("md_lock_check_outline", 0xF16A8),
    ("md_lock_clock", 0xF097F),
    ("md_lock_minus", 0xF16A9),
    ("md_lock_minus_outline", 0xF16AA),
    ("md_lock_off", 0xF1671),
    ("md_lock_off_outline", 0xF1672),
    ("md_lock_open", 0xF033F),
    ("md_lock_open_alert", 0xF139B),
    ("md_lock_open_alert_outline", 0xF15D2),
    ("md_lock_open_check", 0xF139C),
    ("md_lock_open_check_outline", 0xF16AB),
    ("md_lock_open_minus", 0xF16AC),
    ("md_lock_open_minus_outline", 0xF16AD),
    ("md_lock_open_outline", 0xF0340),
    ("md_lock_open_plus", 0xF16AE),
    ("md_lock_open_plus_outline", 0xF16AF),
    ("md_lock_open_remove", 0xF16B0),
    ("md_lock_open_remove_outline", 0xF16B1),
    ("md_lock_open_variant", 0xF0FC6),
    ("md_lock_open_variant_outline", 0xF0FC7),
    ("md_lock_outline", 0xF0341),
    ("md_lock_pattern", 0xF06EA),
    ("md_lock_plus", 0xF05FB),
    ("md_lock_plus_outline", 0xF16B2),
    ("md_lock_question", 0xF08EF),
    ("md_lock_remove", 0xF16B3),
    ("md_lock_remove_outline", 0xF16B4),
    ("md_lock_reset", 0xF0773),
    ("md_lock_smart", 0xF08B2),
    ("md_locker", 0xF07D7),
    ("md_locker_multiple", 0xF07D8),
    ("md_login", 0xF0342),
    ("md_logout", 0xF0343),
    ("md_logout_variant", 0xF05FD),
    ("md_longitude", 0xF0F5A),
    ("md_looks", 0xF0344),
    ("md_lotion", 0xF1582),
    ("md_lotion_outline", 0xF1583),
    ("md_lotion_plus", 0xF1584),
    ("md_lotion_plus_outline", 0xF1585),
    ("md_loupe", 0xF0345),
    ("md_lumx", 0xF0346),
    ("md_lungs", 0xF1084),
    ("md_mace", 0xF1843),
    ("md_magazine_pistol", 0xF0324),
    ("md_magazine_rifle", 0xF0323),
    ("md_magic_staff", 0xF1844),
    ("md_magnet", 0xF0347),
    ("md_magnet_on", 0xF0348),
    ("md_magnify", 0xF0349),
    ("md_magnify_close", 0xF0980),
    ("md_magnify_expand", 0xF1874),
    ("md_magnify_minus", 0xF034A),
    ("md_magnify_minus_cursor", 0xF0A62),
    ("md_magnify_minus_outline", 0xF06EC),
    ("md_magnify_plus", 0xF034B),
    ("md_magnify_plus_cursor", 0xF0A63),
    ("md_magnify_plus_outline", 0xF06ED),
    ("md_magnify_remove_cursor", 0xF120C),
    ("md_magnify_remove_outline", 0xF120D),
    ("md_magnify_scan", 0xF1276),
    ("md_mail", 0xF0EBB),
    ("md_mailbox", 0xF06EE),
    ("md_mailbox_open", 0xF0D88),
    ("md_mailbox_open_outline", 0xF0D89),
    ("md_mailbox_open_up", 0xF0D8A),
    ("md_mailbox_open_up_outline", 0xF0D8B),
    ("md_mailbox_outline", 0xF0D8C),
    ("md_mailbox_up", 0xF0D8D),
    ("md_mailbox_up_outline", 0xF0D8E),
    ("md_manjaro", 0xF160A),
    ("md_map", 0xF034D),
    ("md_map_check", 0xF0EBC),
    ("md_map_check_outline", 0xF0EBD),
    ("md_map_clock", 0xF0D1E),
    ("md_map_clock_outline", 0xF0D1F),
    ("md_map_legend", 0xF0A01),
    ("md_map_marker", 0xF034E),
    ("md_map_marker_account", 0xF18E3),
    ("md_map_marker_account_outline", 0xF18E4),
    ("md_map_marker_alert", 0xF0F05),
    ("md_map_marker_alert_outline", 0xF0F06),
    ("md_map_marker_check", 0xF0C95),
    ("md_map_marker_check_outline", 0xF12FB),
    ("md_map_marker_circle", 0xF034F),
    ("md_map_marker_distance", 0xF08F0),
    ("md_map_marker_down", 0xF1102),
    ("md_map_marker_left", 0xF12DB),
    ("md_map_marker_left_outline", 0xF12DD),
    ("md_map_marker_minus", 0xF0650),
    ("md_map_marker_minus_outline", 0xF12F9),
    ("md_map_marker_multiple", 0xF0350),
    ("md_map_marker_multiple_outline", 0xF1277),
    ("md_map_marker_off", 0xF0351),
    ("md_map_marker_off_outline", 0xF12FD),
    ("md_map_marker_outline", 0xF07D9),
    ("md_map_marker_path", 0xF0D20),
    ("md_map_marker_plus", 0xF0651),
    ("md_map_marker_plus_outline", 0xF12F8),
    ("md_map_marker_question", 0xF0F07),
    ("md_map_marker_question_outline", 0xF0F08),
    ("md_map_marker_radius", 0xF0352),
    ("md_map_marker_radius_outline", 0xF12FC),
    ("md_map_marker_remove", 0xF0F09),
    ("md_map_marker_remove_outline", 0xF12FA),
    ("md_map_marker_remove_variant", 0xF0F0A),
    ("md_map_marker_right", 0xF12DC),
    ("md_map_marker_right_outline", 0xF12DE),
    ("md_map_marker_star", 0xF1608),
    ("md_map_marker_star_outline", 0xF1609),
    ("md_map_marker_up", 0xF1103),
    ("md_map_minus", 0xF0981),
    ("md_map_outline", 0xF0982),
    ("md_map_plus", 0xF0983),
    ("md_map_search", 0xF0984),
    ("md_map_search_outline", 0xF0985),
    ("md_mapbox", 0xF0BAA),
    ("md_margin", 0xF0353),
    ("md_marker", 0xF0652),
    ("md_marker_cancel", 0xF0DD9),
    ("md_marker_check", 0xF0355),
    ("md_mastodon", 0xF0AD1),
    ("md_material_design", 0xF0986),
    ("md_material_ui", 0xF0357),
    ("md_math_compass", 0xF0358),
    ("md_math_cos", 0xF0C96),
    ("md_math_integral", 0xF0FC8),
    ("md_math_integral_box", 0xF0FC9),
    ("md_math_log", 0xF1085),
    ("md_math_norm", 0xF0FCA),
    ("md_math_norm_box", 0xF0FCB),
    ("md_math_sin", 0xF0C97),
    ("md_math_tan", 0xF0C98),
    ("md_matrix", 0xF0628),
    ("md_medal", 0xF0987),
    ("md_medal_outline", 0xF1326),
    ("md_medical_bag", 0xF06EF),
    ("md_medical_cotton_swab", 0xF1AB8),
    ("md_meditation", 0xF117B),
    ("md_memory", 0xF035B),
    ("md_menorah", 0xF17D4),
    ("md_menorah_fire", 0xF17D5),
    ("md_menu", 0xF035C),
    ("md_menu_down", 0xF035D),
    ("md_menu_down_outline", 0xF06B6),
    ("md_menu_left", 0xF035E),
    ("md_menu_left_outline", 0xF0A02),
    ("md_menu_open", 0xF0BAB),
    ("md_menu_right", 0xF035F),
    ("md_menu_right_outline", 0xF0A03),
    ("md_menu_swap", 0xF0A64),
    ("md_menu_swap_outline", 0xF0A65),
    ("md_menu_up", 0xF0360),
    ("md_menu_up_outline", 0xF06B7),
    ("md_merge", 0xF0F5C),
    ("md_message", 0xF0361),
    ("md_message_alert", 0xF0362),
    ("md_message_alert_outline", 0xF0A04),
    ("md_message_arrow_left", 0xF12F2),
    ("md_message_arrow_left_outline", 0xF12F3),
    ("md_message_arrow_right", 0xF12F4),
    ("md_message_arrow_right_outline", 0xF12F5),
    ("md_message_badge", 0xF1941),
    ("md_message_badge_outline", 0xF1942),
    ("md_message_bookmark", 0xF15AC),
    ("md_message_bookmark_outline", 0xF15AD),
    ("md_message_bulleted", 0xF06A2),
    ("md_message_bulleted_off", 0xF06A3),
    ("md_message_cog", 0xF06F1),
    ("md_message_cog_outline", 0xF1172),
    ("md_message_draw", 0xF0363),
    ("md_message_fast", 0xF19CC),
    ("md_message_fast_outline", 0xF19CD),
    ("md_message_flash", 0xF15A9),
    ("md_message_flash_outline", 0xF15AA),
    ("md_message_image", 0xF0364),
    ("md_message_image_outline", 0xF116C),
    ("md_message_lock", 0xF0FCC),
    ("md_message_lock_outline", 0xF116D),
    ("md_message_minus", 0xF116E),
    ("md_message_minus_outline", 0xF116F),
    ("md_message_off", 0xF164D),
    ("md_message_off_outline", 0xF164E),
    ("md_message_outline", 0xF0365),
    ("md_message_plus", 0xF0653),
    ("md_message_plus_outline", 0xF10BB),
    ("md_message_processing", 0xF0366),
    ("md_message_processing_outline", 0xF1170),
    ("md_message_question", 0xF173A),
    ("md_message_question_outline", 0xF173B),
    ("md_message_reply", 0xF0367),
    ("md_message_reply_outline", 0xF173D),
    ("md_message_reply_text", 0xF0368),
    ("md_message_reply_text_outline", 0xF173E),
    ("md_message_settings", 0xF06F0),
    ("md_message_settings_outline", 0xF1171),
    ("md_message_star", 0xF069A),
    ("md_message_star_outline", 0xF1250),
    ("md_message_text", 0xF0369),
    ("md_message_text_clock", 0xF1173),
    ("md_message_text_clock_outline", 0xF1174),
    ("md_message_text_fast", 0xF19CE),
    ("md_message_text_fast_outline", 0xF19CF),
    ("md_message_text_lock", 0xF0FCD),
    ("md_message_text_lock_outline", 0xF1175),
    ("md_message_text_outline", 0xF036A),
    ("md_message_video", 0xF036B),
    ("md_meteor", 0xF0629),
    ("md_meter_electric", 0xF1A57),
    ("md_meter_electric_outline", 0xF1A58),
    ("md_meter_gas", 0xF1A59),
    ("md_meter_gas_outline", 0xF1A5A),
    ("md_metronome", 0xF07DA),
    ("md_metronome_tick", 0xF07DB),
    ("md_micro_sd", 0xF07DC),
    ("md_microphone", 0xF036C),
    ("md_microphone_minus", 0xF08B3),
    ("md_microphone_off", 0xF036D),
    ("md_microphone_outline", 0xF036E),
    ("md_microphone_plus", 0xF08B4),
    ("md_microphone_question", 0xF1989),
    ("md_microphone_question_outline", 0xF198A),
    ("md_microphone_settings", 0xF036F),
    ("md_microphone_variant", 0xF0370),
    ("md_microphone_variant_off", 0xF0371),
    ("md_microscope", 0xF0654),
    ("md_microsoft", 0xF0372),
    ("md_microsoft_access", 0xF138E),
    ("md_microsoft_azure", 0xF0805),
    ("md_microsoft_azure_devops", 0xF0FD5),
    ("md_microsoft_bing", 0xF00A4),
    ("md_microsoft_dynamics_365", 0xF0988),
    ("md_microsoft_edge", 0xF01E9),
    ("md_microsoft_excel", 0xF138F),
    ("md_microsoft_internet_explorer", 0xF0300),
    ("md_microsoft_office", 0xF03C6),
    ("md_microsoft_onedrive", 0xF03CA),
    ("md_microsoft_onenote", 0xF0747),
    ("md_microsoft_outlook", 0xF0D22),
    ("md_microsoft_powerpoint", 0xF1390),
    ("md_microsoft_sharepoint", 0xF1391),
    ("md_microsoft_teams", 0xF02BB),
    ("md_microsoft_visual_studio", 0xF0610),
    ("md_microsoft_visual_studio_code", 0xF0A1E),
    ("md_microsoft_windows", 0xF05B3),
    ("md_microsoft_windows_classic", 0xF0A21),
    ("md_microsoft_word", 0xF1392),
    ("md_microsoft_xbox", 0xF05B9),
    ("md_microsoft_xbox_controller", 0xF05BA),
    ("md_microsoft_xbox_controller_battery_alert", 0xF074B),
    ("md_microsoft_xbox_controller_battery_charging", 0xF0A22),
    ("md_microsoft_xbox_controller_battery_empty", 0xF074C),
    ("md_microsoft_xbox_controller_battery_full", 0xF074D),
    ("md_microsoft_xbox_controller_battery_low", 0xF074E),
    ("md_microsoft_xbox_controller_battery_medium", 0xF074F),
    ("md_microsoft_xbox_controller_battery_unknown", 0xF0750),
    ("md_microsoft_xbox_controller_menu", 0xF0E6F),
    ("md_microsoft_xbox_controller_off", 0xF05BB),
    ("md_microsoft_xbox_controller_view", 0xF0E70),
    ("md_microwave", 0xF0C99),
    ("md_microwave_off", 0xF1423),
    ("md_middleware", 0xF0F5D),
    ("md_middleware_outline", 0xF0F5E),
    ("md_midi", 0xF08F1),
    ("md_midi_port", 0xF08F2),
    ("md_mine", 0xF0DDA),
    ("md_minecraft", 0xF0373),
    ("md_mini_sd", 0xF0A05),
    ("md_minidisc", 0xF0A06),
    ("md_minus", 0xF0374),
    ("md_minus_box", 0xF0375),
    ("md_minus_box_multiple", 0xF1141),
    ("md_minus_box_multiple_outline", 0xF1142),
    ("md_minus_box_outline", 0xF06F2),
    ("md_minus_circle", 0xF0376),
    ("md_minus_circle_multiple", 0xF035A),
    ("md_minus_circle_multiple_outline", 0xF0AD3),
    ("md_minus_circle_off", 0xF1459),
    ("md_minus_circle_off_outline", 0xF145A),
    ("md_minus_circle_outline", 0xF0377),
    ("md_minus_network", 0xF0378),
    ("md_minus_network_outline", 0xF0C9A),
    ("md_minus_thick", 0xF1639),
    ("md_mirror", 0xF11FD),
    ("md_mirror_rectangle", 0xF179F),
    ("md_mirror_variant", 0xF17A0),
    ("md_mixed_martial_arts", 0xF0D8F),
    ("md_mixed_reality", 0xF087F),
    ("md_molecule", 0xF0BAC),
    ("md_molecule_co", 0xF12FE),
    ("md_molecule_co2", 0xF07E4),
    ("md_monitor", 0xF0379),
    ("md_monitor_account", 0xF1A5B),
    ("md_monitor_arrow_down", 0xF19D0),
    ("md_monitor_arrow_down_variant", 0xF19D1),
    ("md_monitor_cellphone", 0xF0989),
    ("md_monitor_cellphone_star", 0xF098A),
    ("md_monitor_dashboard", 0xF0A07),
    ("md_monitor_edit", 0xF12C6),
    ("md_monitor_eye", 0xF13B4),
    ("md_monitor_lock", 0xF0DDB),
    ("md_monitor_multiple", 0xF037A),
    ("md_monitor_off", 0xF0D90),
    ("md_monitor_screenshot", 0xF0E51),
    ("md_monitor_share", 0xF1483),
    ("md_monitor_shimmer", 0xF1104),
    ("md_monitor_small", 0xF1876),
    ("md_monitor_speaker", 0xF0F5F),
    ("md_monitor_speaker_off", 0xF0F60),
    ("md_monitor_star", 0xF0DDC),
    ("md_moon_first_quarter", 0xF0F61),
    ("md_moon_full", 0xF0F62),
    ("md_moon_last_quarter", 0xF0F63),
    ("md_moon_new", 0xF0F64),
    ("md_moon_waning_crescent", 0xF0F65),
    ("md_moon_waning_gibbous", 0xF0F66),
    ("md_moon_waxing_crescent", 0xF0F67),
    ("md_moon_waxing_gibbous", 0xF0F68),
    ("md_moped", 0xF1086),
    ("md_moped_electric", 0xF15B7),
    ("md_moped_electric_outline", 0xF15B8),
    ("md_moped_outline", 0xF15B9),
    ("md_more", 0xF037B),
    ("md_mortar_pestle", 0xF1748),
    ("md_mortar_pestle_plus", 0xF03F1),
    ("md_mosque", 0xF1827),
    ("md_mother_heart", 0xF1314),
    ("md_mother_nurse", 0xF0D21),
    ("md_motion", 0xF15B2),
    ("md_motion_outline", 0xF15B3),
    ("md_motion_pause", 0xF1590),
    ("md_motion_pause_outline", 0xF1592),
    ("md_motion_play", 0xF158F),
    ("md_motion_play_outline", 0xF1591),
    ("md_motion_sensor", 0xF0D91),
    ("md_motion_sensor_off", 0xF1435),
    ("md_motorbike", 0xF037C),
    ("md_motorbike_electric", 0xF15BA),
    ("md_mouse", 0xF037D),
    ("md_mouse_bluetooth", 0xF098B),
    ("md_mouse_move_down", 0xF1550),
    ("md_mouse_move_up", 0xF1551),
    ("md_mouse_move_vertical", 0xF1552),
    ("md_mouse_off", 0xF037E),
    ("md_mouse_variant", 0xF037F),
    ("md_mouse_variant_off", 0xF0380),
    ("md_move_resize", 0xF0655),
    ("md_move_resize_variant", 0xF0656),
    ("md_movie", 0xF0381),
    ("md_movie_check", 0xF16F3),
    ("md_movie_check_outline", 0xF16F4),
    ("md_movie_cog", 0xF16F5),
    ("md_movie_cog_outline", 0xF16F6),
    ("md_movie_edit", 0xF1122),
    ("md_movie_edit_outline", 0xF1123),
    ("md_movie_filter", 0xF1124),
    ("md_movie_filter_outline", 0xF1125),
    ("md_movie_minus", 0xF16F7),
    ("md_movie_minus_outline", 0xF16F8),
    ("md_movie_off", 0xF16F9),
    ("md_movie_off_outline", 0xF16FA),
    ("md_movie_open", 0xF0FCE),
    ("md_movie_open_check", 0xF16FB),
    ("md_movie_open_check_outline", 0xF16FC),
    ("md_movie_open_cog", 0xF16FD),
    ("md_movie_open_cog_outline", 0xF16FE),
    ("md_movie_open_edit", 0xF16FF),
    ("md_movie_open_edit_outline", 0xF1700),
    ("md_movie_open_minus", 0xF1701),
    ("md_movie_open_minus_outline", 0xF1702),
    ("md_movie_open_off", 0xF1703),
    ("md_movie_open_off_outline", 0xF1704),
    ("md_movie_open_outline", 0xF0FCF),
    ("md_movie_open_play", 0xF1705),
    ("md_movie_open_play_outline", 0xF1706),
    ("md_movie_open_plus", 0xF1707),
    ("md_movie_open_plus_outline", 0xF1708),
    ("md_movie_open_remove", 0xF1709),
    ("md_movie_open_remove_outline", 0xF170A),
    ("md_movie_open_settings", 0xF170B),
    ("md_movie_open_settings_outline", 0xF170C),
    ("md_movie_open_star", 0xF170D),
    ("md_movie_open_star_outline", 0xF170E),
    ("md_movie_outline", 0xF0DDD),
    ("md_movie_play", 0xF170F),
    ("md_movie_play_outline", 0xF1710),
    ("md_movie_plus", 0xF1711),
    ("md_movie_plus_outline", 0xF1712),
    ("md_movie_remove", 0xF1713),
    ("md_movie_remove_outline", 0xF1714),
    ("md_movie_roll", 0xF07DE),
    ("md_movie_search", 0xF11D2),
    ("md_movie_search_outline", 0xF11D3),
    ("md_movie_settings", 0xF1715),
    ("md_movie_settings_outline", 0xF1716),
    ("md_movie_star", 0xF1717),
    ("md_movie_star_outline", 0xF1718),
    ("md_mower", 0xF166F),
    ("md_mower_bag", 0xF1670),
    ("md_muffin", 0xF098C),
    ("md_multicast", 0xF1893),
    ("md_multiplication", 0xF0382),
    ("md_multiplication_box", 0xF0383),
    ("md_mushroom", 0xF07DF),
    ("md_mushroom_off", 0xF13FA),
    ("md_mushroom_off_outline", 0xF13FB),
    ("md_mushroom_outline", 0xF07E0),
    ("md_music", 0xF075A),
    ("md_music_accidental_double_flat", 0xF0F69),
    ("md_music_accidental_double_sharp", 0xF0F6A),
    ("md_music_accidental_flat", 0xF0F6B),
    ("md_music_accidental_natural", 0xF0F6C),
    ("md_music_accidental_sharp", 0xF0F6D),
    ("md_music_box", 0xF0384),
    ("md_music_box_multiple", 0xF0333),
    ("md_music_box_multiple_outline", 0xF0F04),
    ("md_music_box_outline", 0xF0385),
    ("md_music_circle", 0xF0386),
    ("md_music_circle_outline", 0xF0AD4),
    ("md_music_clef_alto", 0xF0F6E),
    ("md_music_clef_bass", 0xF0F6F),
    ("md_music_clef_treble", 0xF0F70),
    ("md_music_note", 0xF0387),
    ("md_music_note_bluetooth", 0xF05FE),
    ("md_music_note_bluetooth_off", 0xF05FF),
    ("md_music_note_eighth_dotted", 0xF0F71),
    ("md_music_note_half", 0xF0389),
    ("md_music_note_half_dotted", 0xF0F72),
    ("md_music_note_off", 0xF038A),
    ("md_music_note_off_outline", 0xF0F73),
    ("md_music_note_outline", 0xF0F74),
    ("md_music_note_plus", 0xF0DDE),
    ("md_music_note_quarter", 0xF038B),
    ("md_music_note_quarter_dotted", 0xF0F75),
    ("md_music_note_sixteenth", 0xF038C),
    ("md_music_note_sixteenth_dotted", 0xF0F76),
    ("md_music_note_whole", 0xF038D),
    ("md_music_note_whole_dotted", 0xF0F77),
    ("md_music_off", 0xF075B),
    ("md_music_rest_eighth", 0xF0F78),
    ("md_music_rest_half", 0xF0F79),
    ("md_music_rest_quarter", 0xF0F7A),
    ("md_music_rest_sixteenth", 0xF0F7B),
    ("md_music_rest_whole", 0xF0F7C),
    ("md_mustache", 0xF15DE),
    ("md_nail", 0xF0DDF),
    ("md_nas", 0xF08F3),
    ("md_nativescript", 0xF0880),
    ("md_nature", 0xF038E),
    ("md_nature_people", 0xF038F),
    ("md_navigation", 0xF0390),
    ("md_navigation_outline", 0xF1607),
    ("md_navigation_variant_outline", 0xF18F1),
    ("md_near_me", 0xF05CD),
    ("md_necklace", 0xF0F0B),
    ("md_needle", 0xF0391),
    ("md_needle_off", 0xF19D2),
    ("md_netflix", 0xF0746),
    ("md_network", 0xF06F3),
    ("md_network_off", 0xF0C9B),
    ("md_network_off_outline", 0xF0C9C),
    ("md_network_outline", 0xF0C9D),
    ("md_network_pos", 0xF1ACB),
    ("md_network_strength_1", 0xF08F4),
    ("md_network_strength_1_alert", 0xF08F5),
    ("md_network_strength_2", 0xF08F6),
    ("md_network_strength_2_alert", 0xF08F7),
    ("md_network_strength_3", 0xF08F8),
    ("md_network_strength_3_alert", 0xF08F9),
    ("md_network_strength_4", 0xF08FA),
    ("md_network_strength_4_alert", 0xF08FB),
    ("md_network_strength_4_cog", 0xF191A),
    ("md_network_strength_off", 0xF08FC),
    ("md_network_strength_off_outline", 0xF08FD),
    ("md_network_strength_outline", 0xF08FE),
    ("md_new_box", 0xF0394),
    ("md_newspaper", 0xF0395),
    ("md_newspaper_check", 0xF1943),
    ("md_newspaper_minus", 0xF0F0C),
    ("md_newspaper_plus", 0xF0F0D),
    ("md_newspaper_remove", 0xF1944),
    ("md_newspaper_variant", 0xF1001),
    ("md_newspaper_variant_multiple", 0xF1002),
    ("md_newspaper_variant_multiple_outline", 0xF1003),
    ("md_newspaper_variant_outline", 0xF1004),
    ("md_nfc", 0xF0396),
    ("md_nfc_search_variant", 0xF0E53),
    ("md_nfc_tap", 0xF0397),
    ("md_nfc_variant", 0xF0398),
    ("md_nfc_variant_off", 0xF0E54),
    ("md_ninja", 0xF0774),
    ("md_nintendo_game_boy", 0xF1393),
    ("md_nintendo_switch", 0xF07E1),
    ("md_nintendo_wii", 0xF05AB),
    ("md_nintendo_wiiu", 0xF072D),
    ("md_nix", 0xF1105),
    ("md_nodejs", 0xF0399),
    ("md_noodles", 0xF117E),
    ("md_not_equal", 0xF098D),
    ("md_not_equal_variant", 0xF098E),
    ("md_note", 0xF039A),
    ("md_note_alert", 0xF177D),
    ("md_note_alert_outline", 0xF177E),
    ("md_note_check", 0xF177F),
    ("md_note_check_outline", 0xF1780),
    ("md_note_edit", 0xF1781),
    ("md_note_edit_outline", 0xF1782),
    ("md_note_minus", 0xF164F),
    ("md_note_minus_outline", 0xF1650),
    ("md_note_multiple", 0xF06B8),
    ("md_note_multiple_outline", 0xF06B9),
    ("md_note_off", 0xF1783),
    ("md_note_off_outline", 0xF1784),
    ("md_note_outline", 0xF039B),
    ("md_note_plus", 0xF039C),
    ("md_note_plus_outline", 0xF039D),
    ("md_note_remove", 0xF1651),
    ("md_note_remove_outline", 0xF1652),
    ("md_note_search", 0xF1653),
    ("md_note_search_outline", 0xF1654),
    ("md_note_text", 0xF039E),
    ("md_note_text_outline", 0xF11D7),
    ("md_notebook", 0xF082E),
    ("md_notebook_check", 0xF14F5),
    ("md_notebook_check_outline", 0xF14F6),
    ("md_notebook_edit", 0xF14E7),
    ("md_notebook_edit_outline", 0xF14E9),
    ("md_notebook_heart", 0xF1A0B),
    ("md_notebook_heart_outline", 0xF1A0C),
    ("md_notebook_minus", 0xF1610),
    ("md_notebook_minus_outline", 0xF1611),
    ("md_notebook_multiple", 0xF0E55),
    ("md_notebook_outline", 0xF0EBF),
    ("md_notebook_plus", 0xF1612),
    ("md_notebook_plus_outline", 0xF1613),
    ("md_notebook_remove", 0xF1614),
    ("md_notebook_remove_outline", 0xF1615),
    ("md_notification_clear_all", 0xF039F),
    ("md_npm", 0xF06F7),
    ("md_nuke", 0xF06A4),
    ("md_null", 0xF07E2),
    ("md_numeric", 0xF03A0),
    ("md_numeric_0_box", 0xF03A1),
    ("md_numeric_0_box_multiple", 0xF0F0E),
    ("md_numeric_0_box_multiple_outline", 0xF03A2),
    ("md_numeric_0_box_outline", 0xF03A3),
    ("md_numeric_1", 0xF0B3A),
    ("md_numeric_10", 0xF0FE9),
    ("md_numeric_10_box", 0xF0F7D),
    ("md_numeric_10_box_multiple", 0xF0FEA),
    ("md_numeric_10_box_multiple_outline", 0xF0FEB),
    ("md_numeric_10_box_outline", 0xF0F7E),
    ("md_numeric_10_circle", 0xF0FEC),
    ("md_numeric_10_circle_outline", 0xF0FED),
    ("md_numeric_1_box", 0xF03A4),
    ("md_numeric_1_box_multiple", 0xF0F0F),
    ("md_numeric_1_box_multiple_outline", 0xF03A5),
    ("md_numeric_1_box_outline", 0xF03A6),
    ("md_numeric_1_circle", 0xF0CA0),
    ("md_numeric_1_circle_outline", 0xF0CA1),
    ("md_numeric_2", 0xF0B3B),
    ("md_numeric_2_box", 0xF03A7),
    ("md_numeric_2_box_multiple", 0xF0F10),
    ("md_numeric_2_box_multiple_outline", 0xF03A8),
    ("md_numeric_2_box_outline", 0xF03A9),
    ("md_numeric_2_circle", 0xF0CA2),
    ("md_numeric_2_circle_outline", 0xF0CA3),
    ("md_numeric_3", 0xF0B3C),
    ("md_numeric_3_box", 0xF03AA),
    ("md_numeric_3_box_multiple", 0xF0F11),
    ("md_numeric_3_box_multiple_outline", 0xF03AB),
    ("md_numeric_3_box_outline", 0xF03AC),
    ("md_numeric_3_circle", 0xF0CA4),
    ("md_numeric_3_circle_outline", 0xF0CA5),
    ("md_numeric_4", 0xF0B3D),
    ("md_numeric_4_box", 0xF03AD),
    ("md_numeric_4_box_multiple", 0xF0F12),
    ("md_numeric_4_box_multiple_outline", 0xF03B2),
    ("md_numeric_4_box_outline", 0xF03AE),
    ("md_numeric_4_circle", 0xF0CA6),
    ("md_numeric_4_circle_outline", 0xF0CA7),
    ("md_numeric_5", 0xF0B3E),
    ("md_numeric_5_box", 0xF03B1),
    ("md_numeric_5_box_multiple", 0xF0F13),
    ("md_numeric_5_box_multiple_outline", 0xF03AF),
    ("md_numeric_5_box_outline", 0xF03B0),
    ("md_numeric_5_circle", 0xF0CA8),
    ("md_numeric_5_circle_outline", 0xF0CA9),
    ("md_numeric_6", 0xF0B3F),
    ("md_numeric_6_box", 0xF03B3),
    ("md_numeric_6_box_multiple", 0xF0F14),
    ("md_numeric_6_box_multiple_outline", 0xF03B4),
    ("md_numeric_6_box_outline", 0xF03B5),
    ("md_numeric_6_circle", 0xF0CAA),
    ("md_numeric_6_circle_outline", 0xF0CAB),
    ("md_numeric_7", 0xF0B40),
    ("md_numeric_7_box", 0xF03B6),
    ("md_numeric_7_box_multiple", 0xF0F15),
    ("md_numeric_7_box_multiple_outline", 0xF03B7),
    ("md_numeric_7_box_outline", 0xF03B8),
    ("md_numeric_7_circle", 0xF0CAC),
    ("md_numeric_7_circle_outline", 0xF0CAD),
    ("md_numeric_8", 0xF0B41),
    ("md_numeric_8_box", 0xF03B9),
    ("md_numeric_8_box_multiple", 0xF0F16),
    ("md_numeric_8_box_multiple_outline", 0xF03BA),
    ("md_numeric_8_box_outline", 0xF03BB),
    ("md_numeric_8_circle", 0xF0CAE),
    ("md_numeric_8_circle_outline", 0xF0CAF),
    ("md_numeric_9", 0xF0B42),
    ("md_numeric_9_box", 0xF03BC),
    ("md_numeric_9_box_multiple", 0xF0F17),
    ("md_numeric_9_box_multiple_outline", 0xF03BD),
    ("md_numeric_9_box_outline", 0xF03BE),
    ("md_numeric_9_circle", 0xF0CB0),
    ("md_numeric_9_circle_outline", 0xF0CB1),
    ("md_numeric_9_plus", 0xF0FEE),
    ("md_numeric_9_plus_box", 0xF03BF),
    ("md_numeric_9_plus_box_multiple", 0xF0F18),
    ("md_numeric_9_plus_box_multiple_outline", 0xF03C0),
    ("md_numeric_9_plus_box_outline", 0xF03C1),
    ("md_numeric_9_plus_circle", 0xF0CB2),
    ("md_numeric_9_plus_circle_outline", 0xF0CB3),
    ("md_numeric_negative_1", 0xF1052),
    ("md_numeric_off", 0xF19D3),
    ("md_numeric_positive_1", 0xF15CB),
    ("md_nut", 0xF06F8),
    ("md_nutrition", 0xF03C2),
    ("md_nuxt", 0xF1106),
    ("md_oar", 0xF067C),
    ("md_ocarina", 0xF0DE0),
    ("md_oci", 0xF12E9),
    ("md_ocr", 0xF113A),
    ("md_octagon", 0xF03C3),
    ("md_octagon_outline", 0xF03C4),
    ("md_octagram", 0xF06F9),
    ("md_octagram_outline", 0xF0775),
    ("md_octahedron", 0xF1950),
    ("md_octahedron_off", 0xF1951),
    ("md_odnoklassniki", 0xF03C5),
    ("md_offer", 0xF121B),
    ("md_office_building", 0xF0991),
    ("md_office_building_cog", 0xF1949),
    ("md_office_building_cog_outline", 0xF194A),
    ("md_office_building_marker", 0xF1520),
    ("md_office_building_marker_outline", 0xF1521),
    ("md_office_building_outline", 0xF151F),
    ("md_oil", 0xF03C7),
    ("md_oil_lamp", 0xF0F19),
    ("md_oil_level", 0xF1053),
    ("md_oil_temperature", 0xF0FF8),
    ("md_om", 0xF0973),
    ("md_omega", 0xF03C9),
    ("md_one_up", 0xF0BAD),
    ("md_onepassword", 0xF0881),
    ("md_opacity", 0xF05CC),
    ("md_open_in_app", 0xF03CB),
    ("md_open_in_new", 0xF03CC),
    ("md_open_source_initiative", 0xF0BAE),
    ("md_openid", 0xF03CD),
    ("md_opera", 0xF03CE),
    ("md_orbit", 0xF0018),
    ("md_orbit_variant", 0xF15DB),
    ("md_order_alphabetical_ascending", 0xF020D),
    ("md_order_alphabetical_descending", 0xF0D07),
    ("md_order_bool_ascending", 0xF02BE),
    ("md_order_bool_ascending_variant", 0xF098F),
    ("md_order_bool_descending", 0xF1384),
    ("md_order_bool_descending_variant", 0xF0990),
    ("md_order_numeric_ascending", 0xF0545),
    ("md_order_numeric_descending", 0xF0546),
    ("md_origin", 0xF0B43),
    ("md_ornament", 0xF03CF),
    ("md_ornament_variant", 0xF03D0),
    ("md_outdoor_lamp", 0xF1054),
    ("md_overscan", 0xF1005),
    ("md_owl", 0xF03D2),
    ("md_pac_man", 0xF0BAF),
    ("md_package", 0xF03D3),
    ("md_package_down", 0xF03D4),
    ("md_package_up", 0xF03D5),
    ("md_package_variant", 0xF03D6),
    ("md_package_variant_closed", 0xF03D7),
    ("md_package_variant_closed_minus", 0xF19D4),
    ("md_package_variant_closed_plus", 0xF19D5),
    ("md_package_variant_closed_remove", 0xF19D6),
    ("md_package_variant_minus", 0xF19D7),
    ("md_package_variant_plus", 0xF19D8),
    ("md_package_variant_remove", 0xF19D9),
    ("md_page_first", 0xF0600),
    ("md_page_last", 0xF0601),
    ("md_page_layout_body", 0xF06FA),
    ("md_page_layout_footer", 0xF06FB),
    ("md_page_layout_header", 0xF06FC),
    ("md_page_layout_header_footer", 0xF0F7F),
    ("md_page_layout_sidebar_left", 0xF06FD),
    ("md_page_layout_sidebar_right", 0xF06FE),
    ("md_page_next", 0xF0BB0),
    ("md_page_next_outline", 0xF0BB1),
    ("md_page_previous", 0xF0BB2),
    ("md_page_previous_outline", 0xF0BB3),
    ("md_pail", 0xF1417),
    ("md_pail_minus", 0xF1437),
    ("md_pail_minus_outline", 0xF143C),
    ("md_pail_off", 0xF1439),
    ("md_pail_off_outline", 0xF143E),
    ("md_pail_outline", 0xF143A),
    ("md_pail_plus", 0xF1436),
    ("md_pail_plus_outline", 0xF143B),
    ("md_pail_remove", 0xF1438),
    ("md_pail_remove_outline", 0xF143D),
    ("md_palette", 0xF03D8),
    ("md_palette_advanced", 0xF03D9),
    ("md_palette_outline", 0xF0E0C),
    ("md_palette_swatch", 0xF08B5),
    ("md_palette_swatch_outline", 0xF135C),
    ("md_palette_swatch_variant", 0xF195A),
    ("md_palm_tree", 0xF1055),
    ("md_pan", 0xF0BB4),
    ("md_pan_bottom_left", 0xF0BB5),
    ("md_pan_bottom_right", 0xF0BB6),
    ("md_pan_down", 0xF0BB7),
    ("md_pan_horizontal", 0xF0BB8),
    ("md_pan_left", 0xF0BB9),
    ("md_pan_right", 0xF0BBA),
    ("md_pan_top_left", 0xF0BBB),
    ("md_pan_top_right", 0xF0BBC),
    ("md_pan_up", 0xF0BBD),
    ("md_pan_vertical", 0xF0BBE),
    ("md_panda", 0xF03DA),
    ("md_pandora", 0xF03DB),
    ("md_panorama", 0xF03DC),
    ("md_panorama_fisheye", 0xF03DD),
    ("md_panorama_horizontal", 0xF1928),
    ("md_panorama_horizontal_outline", 0xF03DE),
    ("md_panorama_outline", 0xF198C),
    ("md_panorama_sphere", 0xF198D),
    ("md_panorama_sphere_outline", 0xF198E),
    ("md_panorama_variant", 0xF198F),
    ("md_panorama_variant_outline", 0xF1990),
    ("md_panorama_vertical", 0xF1929),
    ("md_panorama_vertical_outline", 0xF03DF),
    ("md_panorama_wide_angle", 0xF195F),
    ("md_panorama_wide_angle_outline", 0xF03E0),
    ("md_paper_cut_vertical", 0xF03E1),
    ("md_paper_roll", 0xF1157),
    ("md_paper_roll_outline", 0xF1158),
    ("md_paperclip", 0xF03E2),
    ("md_paperclip_check", 0xF1AC6),
    ("md_paperclip_lock", 0xF19DA),
    ("md_paperclip_minus", 0xF1AC7),
    ("md_paperclip_off", 0xF1AC8),
    ("md_paperclip_plus", 0xF1AC9),
    ("md_paperclip_remove", 0xF1ACA),
    ("md_parachute", 0xF0CB4),
    ("md_parachute_outline", 0xF0CB5),
    ("md_paragliding", 0xF1745),
    ("md_parking", 0xF03E3),
    ("md_party_popper", 0xF1056),
    ("md_passport", 0xF07E3),
    ("md_passport_biometric", 0xF0DE1),
    ("md_pasta", 0xF1160),
    ("md_patio_heater", 0xF0F80),
    ("md_patreon", 0xF0882),
    ("md_pause", 0xF03E4),
    ("md_pause_circle", 0xF03E5),
    ("md_pause_circle_outline", 0xF03E6),
    ("md_pause_octagon", 0xF03E7),
    ("md_pause_octagon_outline", 0xF03E8),
    ("md_paw", 0xF03E9),
    ("md_paw_off", 0xF0657),
    ("md_paw_off_outline", 0xF1676),
    ("md_paw_outline", 0xF1675),
    ("md_peace", 0xF0884),
    ("md_peanut", 0xF0FFC),
    ("md_peanut_off", 0xF0FFD),
    ("md_peanut_off_outline", 0xF0FFF),
    ("md_peanut_outline", 0xF0FFE),
    ("md_pen", 0xF03EA),
    ("md_pen_lock", 0xF0DE2),
    ("md_pen_minus", 0xF0DE3),
    ("md_pen_off", 0xF0DE4),
    ("md_pen_plus", 0xF0DE5),
    ("md_pen_remove", 0xF0DE6),
    ("md_pencil", 0xF03EB),
    ("md_pencil_box", 0xF03EC),
    ("md_pencil_box_multiple", 0xF1144),
    ("md_pencil_box_multiple_outline", 0xF1145),
    ("md_pencil_box_outline", 0xF03ED),
    ("md_pencil_circle", 0xF06FF),
    ("md_pencil_circle_outline", 0xF0776),
    ("md_pencil_lock", 0xF03EE),
    ("md_pencil_lock_outline", 0xF0DE7),
    ("md_pencil_minus", 0xF0DE8),
    ("md_pencil_minus_outline", 0xF0DE9),
    ("md_pencil_off", 0xF03EF),
    ("md_pencil_off_outline", 0xF0DEA),
    ("md_pencil_outline", 0xF0CB6),
    ("md_pencil_plus", 0xF0DEB),
    ("md_pencil_plus_outline", 0xF0DEC),
    ("md_pencil_remove", 0xF0DED),
    ("md_pencil_remove_outline", 0xF0DEE),
    ("md_pencil_ruler", 0xF1353),
    ("md_penguin", 0xF0EC0),
    ("md_pentagon", 0xF0701),
    ("md_pentagon_outline", 0xF0700),
    ("md_pentagram", 0xF1667),
    ("md_percent", 0xF03F0),
    ("md_percent_box", 0xF1A02),
    ("md_percent_box_outline", 0xF1A03),
    ("md_percent_circle", 0xF1A04),
    ("md_percent_circle_outline", 0xF1A05),
    ("md_percent_outline", 0xF1278),
    ("md_periodic_table", 0xF08B6),
    ("md_perspective_less", 0xF0D23),
    ("md_perspective_more", 0xF0D24),
    ("md_ph", 0xF17C5),
    ("md_phone", 0xF03F2),
    ("md_phone_alert", 0xF0F1A),
    ("md_phone_alert_outline", 0xF118E),
    ("md_phone_bluetooth", 0xF03F3),
    ("md_phone_bluetooth_outline", 0xF118F),
    ("md_phone_cancel", 0xF10BC),
    ("md_phone_cancel_outline", 0xF1190),
    ("md_phone_check", 0xF11A9),
    ("md_phone_check_outline", 0xF11AA),
    ("md_phone_classic", 0xF0602),
    ("md_phone_classic_off", 0xF1279),
    ("md_phone_clock", 0xF19DB),
    ("md_phone_dial", 0xF1559),
    ("md_phone_dial_outline", 0xF155A),
    ("md_phone_forward", 0xF03F4),
    ("md_phone_forward_outline", 0xF1191),
    ("md_phone_hangup", 0xF03F5),
    ("md_phone_hangup_outline", 0xF1192),
    ("md_phone_in_talk", 0xF03F6),
    ("md_phone_in_talk_outline", 0xF1182),
    ("md_phone_incoming", 0xF03F7),
    ("md_phone_incoming_outline", 0xF1193),
    ("md_phone_lock", 0xF03F8),
    ("md_phone_lock_outline", 0xF1194),
    ("md_phone_log", 0xF03F9),
    ("md_phone_log_outline", 0xF1195),
    ("md_phone_message", 0xF1196),
    ("md_phone_message_outline", 0xF1197),
    ("md_phone_minus", 0xF0658),
    ("md_phone_minus_outline", 0xF1198),
    ("md_phone_missed", 0xF03FA),
    ("md_phone_missed_outline", 0xF11A5),
    ("md_phone_off", 0xF0DEF),
    ("md_phone_off_outline", 0xF11A6),
    ("md_phone_outgoing", 0xF03FB),
    ("md_phone_outgoing_outline", 0xF1199),
    ("md_phone_outline", 0xF0DF0),
    ("md_phone_paused", 0xF03FC),
    ("md_phone_paused_outline", 0xF119A),
    ("md_phone_plus", 0xF0659),
    ("md_phone_plus_outline", 0xF119B),
    ("md_phone_refresh", 0xF1993),
    ("md_phone_refresh_outline", 0xF1994),
    ("md_phone_remove", 0xF152F),
    ("md_phone_remove_outline", 0xF1530),
    ("md_phone_return", 0xF082F),
    ("md_phone_return_outline", 0xF119C),
    ("md_phone_ring", 0xF11AB),
    ("md_phone_ring_outline", 0xF11AC),
    ("md_phone_rotate_landscape", 0xF0885),
    ("md_phone_rotate_portrait", 0xF0886),
    ("md_phone_settings", 0xF03FD),
    ("md_phone_settings_outline", 0xF119D),
    ("md_phone_sync", 0xF1995),
    ("md_phone_sync_outline", 0xF1996),
    ("md_phone_voip", 0xF03FE),
    ("md_pi", 0xF03FF),
    ("md_pi_box", 0xF0400),
    ("md_pi_hole", 0xF0DF1),
    ("md_piano", 0xF067D),
    ("md_piano_off", 0xF0698),
    ("md_pickaxe", 0xF08B7),
    ("md_picture_in_picture_bottom_right", 0xF0E57),
    ("md_picture_in_picture_bottom_right_outline", 0xF0E58),
    ("md_picture_in_picture_top_right", 0xF0E59),
    ("md_picture_in_picture_top_right_outline", 0xF0E5A),
    ("md_pier", 0xF0887),
    ("md_pier_crane", 0xF0888),
    ("md_pig", 0xF0401),
    ("md_pig_variant", 0xF1006),
    ("md_pig_variant_outline", 0xF1678),
    ("md_piggy_bank", 0xF1007),
    ("md_piggy_bank_outline", 0xF1679),
    ("md_pill", 0xF0402),
    ("md_pill_off", 0xF1A5C),
    ("md_pillar", 0xF0702),
    ("md_pin", 0xF0403),
    ("md_pin_off", 0xF0404),
    ("md_pin_off_outline", 0xF0930),
    ("md_pin_outline", 0xF0931),
    ("md_pine_tree", 0xF0405),
    ("md_pine_tree_box", 0xF0406),
    ("md_pine_tree_fire", 0xF141A),
    ("md_pinterest", 0xF0407),
    ("md_pinwheel", 0xF0AD5),
    ("md_pinwheel_outline", 0xF0AD6),
    ("md_pipe", 0xF07E5),
    ("md_pipe_disconnected", 0xF07E6),
    ("md_pipe_leak", 0xF0889),
    ("md_pipe_valve", 0xF184D),
    ("md_pipe_wrench", 0xF1354),
    ("md_pirate", 0xF0A08),
    ("md_pistol", 0xF0703),
    ("md_piston", 0xF088A),
    ("md_pitchfork", 0xF1553),
    ("md_pizza", 0xF0409),
    ("md_play", 0xF040A),
    ("md_play_box", 0xF127A),
    ("md_play_box_lock", 0xF1A16),
    ("md_play_box_lock_open", 0xF1A17),
    ("md_play_box_lock_open_outline", 0xF1A18),
    ("md_play_box_lock_outline", 0xF1A19),
    ("md_play_box_multiple", 0xF0D19),
    ("md_play_box_multiple_outline", 0xF13E6),
    ("md_play_box_outline", 0xF040B),
    ("md_play_circle", 0xF040C),
    ("md_play_circle_outline", 0xF040D),
    ("md_play_network", 0xF088B),
    ("md_play_network_outline", 0xF0CB7),
    ("md_play_outline", 0xF0F1B),
    ("md_play_pause", 0xF040E),
    ("md_play_protected_content", 0xF040F),
    ("md_play_speed", 0xF08FF),
    ("md_playlist_check", 0xF05C7),
    ("md_playlist_edit", 0xF0900),
    ("md_playlist_minus", 0xF0410),
    ("md_playlist_music", 0xF0CB8),
    ("md_playlist_music_outline", 0xF0CB9),
    ("md_playlist_play", 0xF0411),
    ("md_playlist_plus", 0xF0412),
    ("md_playlist_remove", 0xF0413),
    ("md_playlist_star", 0xF0DF2),
    ("md_plex", 0xF06BA),
    ("md_pliers", 0xF19A4),
    ("md_plus", 0xF0415),
    ("md_plus_box", 0xF0416),
    ("md_plus_box_multiple", 0xF0334),
    ("md_plus_box_multiple_outline", 0xF1143),
    ("md_plus_box_outline", 0xF0704),
    ("md_plus_circle", 0xF0417),
    ("md_plus_circle_multiple", 0xF034C),
    ("md_plus_circle_multiple_outline", 0xF0418),
    ("md_plus_circle_outline", 0xF0419),
    ("md_plus_lock", 0xF1A5D),
    ("md_plus_lock_open", 0xF1A5E),
    ("md_plus_minus", 0xF0992),
    ("md_plus_minus_box", 0xF0993),
    ("md_plus_minus_variant", 0xF14C9),
    ("md_plus_network", 0xF041A),
    ("md_plus_network_outline", 0xF0CBA),
    ("md_plus_outline", 0xF0705),
    ("md_plus_thick", 0xF11EC),
    ("md_podcast", 0xF0994),
    ("md_podium", 0xF0D25),
    ("md_podium_bronze", 0xF0D26),
    ("md_podium_gold", 0xF0D27),
    ("md_podium_silver", 0xF0D28),
    ("md_point_of_sale", 0xF0D92),
    ("md_pokeball", 0xF041D),
    ("md_pokemon_go", 0xF0A09),
    ("md_poker_chip", 0xF0830),
    ("md_polaroid", 0xF041E),
    ("md_police_badge", 0xF1167),
    ("md_police_badge_outline", 0xF1168),
    ("md_police_station", 0xF1839),
    ("md_poll", 0xF041F),
    ("md_polo", 0xF14C3),
    ("md_polymer", 0xF0421),
    ("md_pool", 0xF0606),
    ("md_pool_thermometer", 0xF1A5F),
    ("md_popcorn", 0xF0422),
    ("md_post", 0xF1008),
    ("md_post_lamp", 0xF1A60),
    ("md_post_outline", 0xF1009),
    ("md_postage_stamp", 0xF0CBB),
    ("md_pot", 0xF02E5),
    ("md_pot_mix", 0xF065B),
    ("md_pot_mix_outline", 0xF0677),
    ("md_pot_outline", 0xF02FF),
    ("md_pot_steam", 0xF065A),
    ("md_pot_steam_outline", 0xF0326),
    ("md_pound", 0xF0423),
    ("md_pound_box", 0xF0424),
    ("md_pound_box_outline", 0xF117F),
    ("md_power", 0xF0425),
    ("md_power_cycle", 0xF0901),
    ("md_power_off", 0xF0902),
    ("md_power_on", 0xF0903),
    ("md_power_plug", 0xF06A5),
    ("md_power_plug_off", 0xF06A6),
    ("md_power_plug_off_outline", 0xF1424),
    ("md_power_plug_outline", 0xF1425),
    ("md_power_settings", 0xF0426),
    ("md_power_sleep", 0xF0904),
    ("md_power_socket", 0xF0427),
    ("md_power_socket_au", 0xF0905),
    ("md_power_socket_ch", 0xF0FB3),
    ("md_power_socket_de", 0xF1107),
    ("md_power_socket_eu", 0xF07E7),
    ("md_power_socket_fr", 0xF1108),
    ("md_power_socket_it", 0xF14FF),
    ("md_power_socket_jp", 0xF1109),
    ("md_power_socket_uk", 0xF07E8),
    ("md_power_socket_us", 0xF07E9),
    ("md_power_standby", 0xF0906),
    ("md_powershell", 0xF0A0A),
    ("md_prescription", 0xF0706),
    ("md_presentation", 0xF0428),
    ("md_presentation_play", 0xF0429),
    ("md_pretzel", 0xF1562),
    ("md_printer", 0xF042A),
    ("md_printer_3d", 0xF042B),
    ("md_printer_3d_nozzle", 0xF0E5B),
    ("md_printer_3d_nozzle_alert", 0xF11C0),
    ("md_printer_3d_nozzle_alert_outline", 0xF11C1),
    ("md_printer_3d_nozzle_heat", 0xF18B8),
    ("md_printer_3d_nozzle_heat_outline", 0xF18B9),
    ("md_printer_3d_nozzle_outline", 0xF0E5C),
    ("md_printer_alert", 0xF042C),
    ("md_printer_check", 0xF1146),
    ("md_printer_eye", 0xF1458),
    ("md_printer_off", 0xF0E5D),
    ("md_printer_off_outline", 0xF1785),
    ("md_printer_outline", 0xF1786),
    ("md_printer_pos", 0xF1057),
    ("md_printer_search", 0xF1457),
    ("md_printer_settings", 0xF0707),
    ("md_printer_wireless", 0xF0A0B),
    ("md_priority_high", 0xF0603),
    ("md_priority_low", 0xF0604),
    ("md_professional_hexagon", 0xF042D),
    ("md_progress_alert", 0xF0CBC),
    ("md_progress_check", 0xF0995),
    ("md_progress_clock", 0xF0996),
    ("md_progress_close", 0xF110A),
    ("md_progress_download", 0xF0997),
    ("md_progress_pencil", 0xF1787),
    ("md_progress_question", 0xF1522),
    ("md_progress_star", 0xF1788),
    ("md_progress_upload", 0xF0998),
    ("md_progress_wrench", 0xF0CBD),
    ("md_projector", 0xF042E),
    ("md_projector_off", 0xF1A23),
    ("md_projector_screen", 0xF042F),
    ("md_projector_screen_off", 0xF180D),
    ("md_projector_screen_off_outline", 0xF180E),
    ("md_projector_screen_outline", 0xF1724),
    ("md_projector_screen_variant", 0xF180F),
    ("md_projector_screen_variant_off", 0xF1810),
    ("md_projector_screen_variant_off_outline", 0xF1811),
    ("md_projector_screen_variant_outline", 0xF1812),
    ("md_propane_tank", 0xF1357),
    ("md_propane_tank_outline", 0xF1358),
    ("md_protocol", 0xF0FD8),
    ("md_publish", 0xF06A7),
    ("md_publish_off", 0xF1945),
    ("md_pulse", 0xF0430),
    ("md_pump", 0xF1402),
    ("md_pumpkin", 0xF0BBF),
    ("md_purse", 0xF0F1C),
    ("md_purse_outline", 0xF0F1D),
    ("md_puzzle", 0xF0431),
    ("md_puzzle_check", 0xF1426),
    ("md_puzzle_check_outline", 0xF1427),
    ("md_puzzle_edit", 0xF14D3),
    ("md_puzzle_edit_outline", 0xF14D9),
    ("md_puzzle_heart", 0xF14D4),
    ("md_puzzle_heart_outline", 0xF14DA),
    ("md_puzzle_minus", 0xF14D1),
    ("md_puzzle_minus_outline", 0xF14D7),
    ("md_puzzle_outline", 0xF0A66),
    ("md_puzzle_plus", 0xF14D0),
    ("md_puzzle_plus_outline", 0xF14D6),
    ("md_puzzle_remove", 0xF14D2),
    ("md_puzzle_remove_outline", 0xF14D8),
    ("md_puzzle_star", 0xF14D5),
    ("md_puzzle_star_outline", 0xF14DB),
    ("md_pyramid", 0xF1952),
    ("md_pyramid_off", 0xF1953),
    ("md_qi", 0xF0999),
    ("md_qqchat", 0xF0605),
    ("md_qrcode", 0xF0432),
    ("md_qrcode_edit", 0xF08B8),
    ("md_qrcode_minus", 0xF118C),
    ("md_qrcode_plus", 0xF118B),
    ("md_qrcode_remove", 0xF118D),
    ("md_qrcode_scan", 0xF0433),
    ("md_quadcopter", 0xF0434),
    ("md_quality_high", 0xF0435),
    ("md_quality_low", 0xF0A0C),
    ("md_quality_medium", 0xF0A0D),
    ("md_quora", 0xF0D29),
    ("md_rabbit", 0xF0907),
    ("md_rabbit_variant", 0xF1A61),
    ("md_rabbit_variant_outline", 0xF1A62),
    ("md_racing_helmet", 0xF0D93),
    ("md_racquetball", 0xF0D94),
    ("md_radar", 0xF0437),
    ("md_radiator", 0xF0438),
    ("md_radiator_disabled", 0xF0AD7),
    ("md_radiator_off", 0xF0AD8),
    ("md_radio", 0xF0439),
    ("md_radio_am", 0xF0CBE),
    ("md_radio_fm", 0xF0CBF),
    ("md_radio_handheld", 0xF043A),
    ("md_radio_off", 0xF121C),
    ("md_radio_tower", 0xF043B),
    ("md_radioactive", 0xF043C),
    ("md_radioactive_circle", 0xF185D),
    ("md_radioactive_circle_outline", 0xF185E),
    ("md_radioactive_off", 0xF0EC1),
    ("md_radiobox_marked", 0xF043E),
    ("md_radiology_box", 0xF14C5),
    ("md_radiology_box_outline", 0xF14C6),
    ("md_radius", 0xF0CC0),
    ("md_radius_outline", 0xF0CC1),
    ("md_railroad_light", 0xF0F1E),
    ("md_rake", 0xF1544),
    ("md_raspberry_pi", 0xF043F),
    ("md_raw", 0xF1A0F),
    ("md_raw_off", 0xF1A10),
    ("md_ray_end", 0xF0440),
    ("md_ray_end_arrow", 0xF0441),
    ("md_ray_start", 0xF0442),
    ("md_ray_start_arrow", 0xF0443),
    ("md_ray_start_end", 0xF0444),
    ("md_ray_start_vertex_end", 0xF15D8),
    ("md_ray_vertex", 0xF0445),
    ("md_razor_double_edge", 0xF1997),
    ("md_razor_single_edge", 0xF1998),
    ("md_react", 0xF0708),
    ("md_read", 0xF0447),
    ("md_receipt", 0xF0449),
    ("md_receipt_outline", 0xF19DC),
    ("md_receipt_text_check", 0xF1A63),
    ("md_receipt_text_check_outline", 0xF1A64),
    ("md_receipt_text_minus", 0xF1A65),
    ("md_receipt_text_minus_outline", 0xF1A66),
    ("md_receipt_text_plus", 0xF1A67),
    ("md_receipt_text_plus_outline", 0xF1A68),
    ("md_receipt_text_remove", 0xF1A69),
    ("md_receipt_text_remove_outline", 0xF1A6A),
    ("md_record", 0xF044A),
    ("md_record_circle", 0xF0EC2),
    ("md_record_circle_outline", 0xF0EC3),
    ("md_record_player", 0xF099A),
    ("md_record_rec", 0xF044B),
    ("md_rectangle", 0xF0E5E),
    ("md_rectangle_outline", 0xF0E5F),
    ("md_recycle", 0xF044C),
    ("md_recycle_variant", 0xF139D),
    ("md_reddit", 0xF044D),
    ("md_redhat", 0xF111B),
    ("md_redo", 0xF044E),
    ("md_redo_variant", 0xF044F),
    ("md_reflect_horizontal", 0xF0A0E),
    ("md_reflect_vertical", 0xF0A0F),
    ("md_refresh", 0xF0450),
    ("md_refresh_auto", 0xF18F2),
    ("md_refresh_circle", 0xF1377),
    ("md_regex", 0xF0451),
    ("md_registered_trademark", 0xF0A67),
    ("md_reiterate", 0xF1588),
    ("md_relation_many_to_many", 0xF1496),
    ("md_relation_many_to_one", 0xF1497),
    ("md_relation_many_to_one_or_many", 0xF1498),
    ("md_relation_many_to_only_one", 0xF1499),
    ("md_relation_many_to_zero_or_many", 0xF149A),
    ("md_relation_many_to_zero_or_one", 0xF149B),
    ("md_relation_one_or_many_to_many", 0xF149C),
    ("md_relation_one_or_many_to_one", 0xF149D),
    ("md_relation_one_or_many_to_one_or_many", 0xF149E),
    ("md_relation_one_or_many_to_only_one", 0xF149F),
    ("md_relation_one_or_many_to_zero_or_many", 0xF14A0),
    ("md_relation_one_or_many_to_zero_or_one", 0xF14A1),
    ("md_relation_one_to_many", 0xF14A2),
    ("md_relation_one_to_one", 0xF14A3),
    ("md_relation_one_to_one_or_many", 0xF14A4),
    ("md_relation_one_to_only_one", 0xF14A5),
    ("md_relation_one_to_zero_or_many", 0xF14A6),
    ("md_relation_one_to_zero_or_one", 0xF14A7),
    ("md_relation_only_one_to_many", 0xF14A8),
    ("md_relation_only_one_to_one", 0xF14A9),
    ("md_relation_only_one_to_one_or_many", 0xF14AA),
    ("md_relation_only_one_to_only_one", 0xF14AB),
    ("md_relation_only_one_to_zero_or_many", 0xF14AC),
    ("md_relation_only_one_to_zero_or_one", 0xF14AD),
    ("md_relation_zero_or_many_to_many", 0xF14AE),
    ("md_relation_zero_or_many_to_one", 0xF14AF),
    ("md_relation_zero_or_many_to_one_or_many", 0xF14B0),
    ("md_relation_zero_or_many_to_only_one", 0xF14B1),
    ("md_relation_zero_or_many_to_zero_or_many", 0xF14B2),
    ("md_relation_zero_or_many_to_zero_or_one", 0xF14B3),
    ("md_relation_zero_or_one_to_many", 0xF14B4),
    ("md_relation_zero_or_one_to_one", 0xF14B5),
    ("md_relation_zero_or_one_to_one_or_many", 0xF14B6),
    ("md_relation_zero_or_one_to_only_one", 0xF14B7),
    ("md_relation_zero_or_one_to_zero_or_many", 0xF14B8),
    ("md_relation_zero_or_one_to_zero_or_one", 0xF14B9),
    ("md_relative_scale", 0xF0452),
    ("md_reload", 0xF0453),
    ("md_reload_alert", 0xF110B),
    ("md_reminder", 0xF088C),
    ("md_remote", 0xF0454),
    ("md_remote_desktop", 0xF08B9),
    ("md_remote_off", 0xF0EC4),
    ("md_remote_tv", 0xF0EC5),
    ("md_remote_tv_off", 0xF0EC6),
    ("md_rename_box", 0xF0455),
    ("md_reorder_horizontal", 0xF0688),
    ("md_reorder_vertical", 0xF0689),
    ("md_repeat", 0xF0456),
    ("md_repeat_off", 0xF0457),
    ("md_repeat_once", 0xF0458),
    ("md_repeat_variant", 0xF0547),
    ("md_replay", 0xF0459),
    ("md_reply", 0xF045A),
    ("md_reply_all", 0xF045B),
    ("md_reply_all_outline", 0xF0F1F),
    ("md_reply_circle", 0xF11AE),
    ("md_reply_outline", 0xF0F20),
    ("md_reproduction", 0xF045C),
    ("md_resistor", 0xF0B44),
    ("md_resistor_nodes", 0xF0B45),
    ("md_resize", 0xF0A68),
    ("md_resize_bottom_right", 0xF045D),
    ("md_responsive", 0xF045E),
    ("md_restart", 0xF0709),
    ("md_restart_alert", 0xF110C),
    ("md_restart_off", 0xF0D95),
    ("md_restore", 0xF099B),
    ("md_restore_alert", 0xF110D),
    ("md_rewind", 0xF045F),
    ("md_rewind_10", 0xF0D2A),
    ("md_rewind_15", 0xF1946),
    ("md_rewind_30", 0xF0D96),
    ("md_rewind_5", 0xF11F9),
    ("md_rewind_60", 0xF160C),
    ("md_rewind_outline", 0xF070A),
    ("md_rhombus", 0xF070B),
    ("md_rhombus_medium", 0xF0A10),
    ("md_rhombus_medium_outline", 0xF14DC),
    ("md_rhombus_outline", 0xF070C),
    ("md_rhombus_split", 0xF0A11),
    ("md_rhombus_split_outline", 0xF14DD),
    ("md_ribbon", 0xF0460),
    ("md_rice", 0xF07EA),
    ("md_rickshaw", 0xF15BB),
    ("md_rickshaw_electric", 0xF15BC),
    ("md_ring", 0xF07EB),
    ("md_rivet", 0xF0E60),
    ("md_road", 0xF0461),
    ("md_road_variant", 0xF0462),
    ("md_robber", 0xF1058),
    ("md_robot", 0xF06A9),
    ("md_robot_angry", 0xF169D),
    ("md_robot_angry_outline", 0xF169E),
    ("md_robot_confused", 0xF169F),
    ("md_robot_confused_outline", 0xF16A0),
    ("md_robot_dead", 0xF16A1),
    ("md_robot_dead_outline", 0xF16A2),
    ("md_robot_excited", 0xF16A3),
    ("md_robot_excited_outline", 0xF16A4),
    ("md_robot_happy", 0xF1719),
    ("md_robot_happy_outline", 0xF171A),
    ("md_robot_industrial", 0xF0B46),
    ("md_robot_industrial_outline", 0xF1A1A),
    ("md_robot_love", 0xF16A5),
    ("md_robot_love_outline", 0xF16A6),
    ("md_robot_mower", 0xF11F7),
    ("md_robot_mower_outline", 0xF11F3),
    ("md_robot_off", 0xF16A7),
    ("md_robot_off_outline", 0xF167B),
    ("md_robot_outline", 0xF167A),
    ("md_robot_vacuum", 0xF070D),
    ("md_robot_vacuum_variant", 0xF0908),
    ("md_rocket", 0xF0463),
    ("md_rocket_launch", 0xF14DE),
    ("md_rocket_launch_outline", 0xF14DF),
    ("md_rocket_outline", 0xF13AF),
    ("md_rodent", 0xF1327),
    ("md_roller_shade", 0xF1A6B),
    ("md_roller_shade_closed", 0xF1A6C),
    ("md_roller_skate", 0xF0D2B),
    ("md_roller_skate_off", 0xF0145),
    ("md_rollerblade", 0xF0D2C),
    ("md_rollerblade_off", 0xF002E),
    ("md_rollupjs", 0xF0BC0),
    ("md_rolodex", 0xF1AB9),
    ("md_rolodex_outline", 0xF1ABA),
    ("md_roman_numeral_2", 0xF1089),
    ("md_roman_numeral_3", 0xF108A),
    ("md_roman_numeral_4", 0xF108B),
    ("md_roman_numeral_6", 0xF108D),
    ("md_roman_numeral_7", 0xF108E),
    ("md_roman_numeral_8", 0xF108F),
    ("md_roman_numeral_9", 0xF1090),
    ("md_room_service", 0xF088D),
    ("md_room_service_outline", 0xF0D97),
    ("md_rotate_360", 0xF1999),
    ("md_rotate_3d", 0xF0EC7),
    ("md_rotate_3d_variant", 0xF0464),
    ("md_rotate_left", 0xF0465),
    ("md_rotate_left_variant", 0xF0466),
    ("md_rotate_orbit", 0xF0D98),
    ("md_rotate_right", 0xF0467),
    ("md_rotate_right_variant", 0xF0468),
    ("md_rounded_corner", 0xF0607),
    ("md_router", 0xF11E2),
    ("md_router_network", 0xF1087),
    ("md_router_wireless", 0xF0469),
    ("md_router_wireless_off", 0xF15A3),
    ("md_router_wireless_settings", 0xF0A69),
    ("md_routes", 0xF046A),
    ("md_routes_clock", 0xF1059),
    ("md_rowing", 0xF0608),
    ("md_rss", 0xF046B),
    ("md_rss_box", 0xF046C),
    ("md_rss_off", 0xF0F21),
    ("md_rug", 0xF1475),
    ("md_rugby", 0xF0D99),
    ("md_ruler", 0xF046D),
    ("md_ruler_square", 0xF0CC2),
    ("md_ruler_square_compass", 0xF0EBE),
    ("md_run", 0xF070E),
    ("md_run_fast", 0xF046E),
    ("md_rv_truck", 0xF11D4),
    ("md_sack", 0xF0D2E),
    ("md_sack_percent", 0xF0D2F),
    ("md_safe", 0xF0A6A),
    ("md_safe_square", 0xF127C),
    ("md_safe_square_outline", 0xF127D),
    ("md_safety_goggles", 0xF0D30),
    ("md_sail_boat", 0xF0EC8),
    ("md_sail_boat_sink", 0xF1AEF),
    ("md_sale", 0xF046F),
    ("md_sale_outline", 0xF1A06),
    ("md_salesforce", 0xF088E),
    ("md_sass", 0xF07EC),
    ("md_satellite", 0xF0470),
    ("md_satellite_uplink", 0xF0909),
    ("md_satellite_variant", 0xF0471),
    ("md_sausage", 0xF08BA),
    ("md_sausage_off", 0xF1789),
    ("md_saw_blade", 0xF0E61),
    ("md_sawtooth_wave", 0xF147A),
    ("md_saxophone", 0xF0609),
    ("md_scale", 0xF0472),
    ("md_scale_balance", 0xF05D1),
    ("md_scale_bathroom", 0xF0473),
    ("md_scale_off", 0xF105A),
    ("md_scale_unbalanced", 0xF19B8),
    ("md_scan_helper", 0xF13D8),
    ("md_scanner", 0xF06AB),
    ("md_scanner_off", 0xF090A),
    ("md_scatter_plot", 0xF0EC9),
    ("md_scatter_plot_outline", 0xF0ECA),
    ("md_scent", 0xF1958),
    ("md_scent_off", 0xF1959),
    ("md_school", 0xF0474),
    ("md_school_outline", 0xF1180),
    ("md_scissors_cutting", 0xF0A6B),
    ("md_scooter", 0xF15BD),
    ("md_scooter_electric", 0xF15BE),
    ("md_scoreboard", 0xF127E),
    ("md_scoreboard_outline", 0xF127F),
    ("md_screen_rotation", 0xF0475),
    ("md_screen_rotation_lock", 0xF0478),
    ("md_screw_flat_top", 0xF0DF3),
    ("md_screw_lag", 0xF0DF4),
    ("md_screw_machine_flat_top", 0xF0DF5),
    ("md_screw_machine_round_top", 0xF0DF6),
    ("md_screw_round_top", 0xF0DF7),
    ("md_screwdriver", 0xF0476),
    ("md_script", 0xF0BC1),
    ("md_script_outline", 0xF0477),
    ("md_script_text", 0xF0BC2),
    ("md_script_text_key", 0xF1725),
    ("md_script_text_key_outline", 0xF1726),
    ("md_script_text_outline", 0xF0BC3),
    ("md_script_text_play", 0xF1727),
    ("md_script_text_play_outline", 0xF1728),
    ("md_sd", 0xF0479),
    ("md_seal", 0xF047A),
    ("md_seal_variant", 0xF0FD9),
    ("md_search_web", 0xF070F),
    ("md_seat", 0xF0CC3),
    ("md_seat_flat", 0xF047B),
    ("md_seat_flat_angled", 0xF047C),
    ("md_seat_individual_suite", 0xF047D),
    ("md_seat_legroom_extra", 0xF047E),
    ("md_seat_legroom_normal", 0xF047F),
    ("md_seat_legroom_reduced", 0xF0480),
    ("md_seat_outline", 0xF0CC4),
    ("md_seat_passenger", 0xF1249),
    ("md_seat_recline_extra", 0xF0481),
    ("md_seat_recline_normal", 0xF0482),
    ("md_seatbelt", 0xF0CC5),
    ("md_security", 0xF0483),
    ("md_security_network", 0xF0484),
    ("md_seed", 0xF0E62),
    ("md_seed_off", 0xF13FD),
    ("md_seed_off_outline", 0xF13FE),
    ("md_seed_outline", 0xF0E63),
    ("md_seed_plus", 0xF1A6D),
    ("md_seed_plus_outline", 0xF1A6E),
    ("md_seesaw", 0xF15A4),
    ("md_segment", 0xF0ECB),
    ("md_select", 0xF0485),
    ("md_select_all", 0xF0486),
    ("md_select_color", 0xF0D31),
    ("md_select_compare", 0xF0AD9),
    ("md_select_drag", 0xF0A6C),
    ("md_select_group", 0xF0F82),
    ("md_select_inverse", 0xF0487),
    ("md_select_marker", 0xF1280),
    ("md_select_multiple", 0xF1281),
    ("md_select_multiple_marker", 0xF1282),
    ("md_select_off", 0xF0488),
    ("md_select_place", 0xF0FDA),
    ("md_select_remove", 0xF17C1),
    ("md_select_search", 0xF1204),
    ("md_selection", 0xF0489),
    ("md_selection_drag", 0xF0A6D),
    ("md_selection_ellipse", 0xF0D32),
    ("md_selection_ellipse_arrow_inside", 0xF0F22),
    ("md_selection_ellipse_remove", 0xF17C2),
    ("md_selection_marker", 0xF1283),
    ("md_selection_multiple", 0xF1285),
    ("md_selection_multiple_marker", 0xF1284),
    ("md_selection_off", 0xF0777),
    ("md_selection_remove", 0xF17C3),
    ("md_selection_search", 0xF1205),
    ("md_semantic_web", 0xF1316),
    ("md_send", 0xF048A),
    ("md_send_check", 0xF1161),
    ("md_send_check_outline", 0xF1162),
    ("md_send_circle", 0xF0DF8),
    ("md_send_circle_outline", 0xF0DF9),
    ("md_send_clock", 0xF1163),
    ("md_send_clock_outline", 0xF1164),
    ("md_send_lock", 0xF07ED),
    ("md_send_lock_outline", 0xF1166),
    ("md_send_outline", 0xF1165),
    ("md_serial_port", 0xF065C),
    ("md_server", 0xF048B),
    ("md_server_minus", 0xF048C),
    ("md_server_network", 0xF048D),
    ("md_server_network_off", 0xF048E),
    ("md_server_off", 0xF048F),
    ("md_server_plus", 0xF0490),
    ("md_server_remove", 0xF0491),
    ("md_server_security", 0xF0492),
    ("md_set_all", 0xF0778),
    ("md_set_center", 0xF0779),
    ("md_set_center_right", 0xF077A),
    ("md_set_left", 0xF077B),
    ("md_set_left_center", 0xF077C),
    ("md_set_left_right", 0xF077D),
    ("md_set_merge", 0xF14E0),
    ("md_set_none", 0xF077E),
    ("md_set_right", 0xF077F),
    ("md_set_split", 0xF14E1),
    ("md_set_square", 0xF145D),
    ("md_set_top_box", 0xF099F),
    ("md_settings_helper", 0xF0A6E),
    ("md_shaker", 0xF110E),
    ("md_shaker_outline", 0xF110F),
    ("md_shape", 0xF0831),
    ("md_shape_circle_plus", 0xF065D),
    ("md_shape_outline", 0xF0832),
    ("md_shape_oval_plus", 0xF11FA),
    ("md_shape_plus", 0xF0495),
    ("md_shape_polygon_plus", 0xF065E),
    ("md_shape_rectangle_plus", 0xF065F),
    ("md_shape_square_plus", 0xF0660),
    ("md_shape_square_rounded_plus", 0xF14FA),
    ("md_share", 0xF0496),
    ("md_share_all", 0xF11F4),
    ("md_share_all_outline", 0xF11F5),
    ("md_share_circle", 0xF11AD),
    ("md_share_off", 0xF0F23),
    ("md_share_off_outline", 0xF0F24),
    ("md_share_outline", 0xF0932),
    ("md_share_variant", 0xF0497),
    ("md_share_variant_outline", 0xF1514),
    ("md_shark", 0xF18BA),
    ("md_shark_fin", 0xF1673),
    ("md_shark_fin_outline", 0xF1674),
    ("md_shark_off", 0xF18BB),
    ("md_sheep", 0xF0CC6),
    ("md_shield", 0xF0498),
    ("md_shield_account", 0xF088F),
    ("md_shield_account_outline", 0xF0A12),
    ("md_shield_account_variant", 0xF15A7),
    ("md_shield_account_variant_outline", 0xF15A8),
    ("md_shield_airplane", 0xF06BB),
    ("md_shield_airplane_outline", 0xF0CC7),
    ("md_shield_alert", 0xF0ECC),
    ("md_shield_alert_outline", 0xF0ECD),
    ("md_shield_bug", 0xF13DA),
    ("md_shield_bug_outline", 0xF13DB),
    ("md_shield_car", 0xF0F83),
    ("md_shield_check", 0xF0565),
    ("md_shield_check_outline", 0xF0CC8),
    ("md_shield_cross", 0xF0CC9),
    ("md_shield_cross_outline", 0xF0CCA),
    ("md_shield_crown", 0xF18BC),
    ("md_shield_crown_outline", 0xF18BD),
    ("md_shield_edit", 0xF11A0),
    ("md_shield_edit_outline", 0xF11A1),
    ("md_shield_half", 0xF1360),
    ("md_shield_half_full", 0xF0780),
    ("md_shield_home", 0xF068A),
    ("md_shield_home_outline", 0xF0CCB),
    ("md_shield_key", 0xF0BC4),
    ("md_shield_key_outline", 0xF0BC5),
    ("md_shield_link_variant", 0xF0D33),
    ("md_shield_link_variant_outline", 0xF0D34),
    ("md_shield_lock", 0xF099D),
    ("md_shield_lock_open", 0xF199A),
    ("md_shield_lock_open_outline", 0xF199B),
    ("md_shield_lock_outline", 0xF0CCC),
    ("md_shield_moon", 0xF1828),
    ("md_shield_moon_outline", 0xF1829),
    ("md_shield_off", 0xF099E),
    ("md_shield_off_outline", 0xF099C),
    ("md_shield_outline", 0xF0499),
    ("md_shield_plus", 0xF0ADA),
    ("md_shield_plus_outline", 0xF0ADB),
    ("md_shield_refresh", 0xF00AA),
    ("md_shield_refresh_outline", 0xF01E0),
    ("md_shield_remove", 0xF0ADC),
    ("md_shield_remove_outline", 0xF0ADD),
    ("md_shield_search", 0xF0D9A),
    ("md_shield_star", 0xF113B),
    ("md_shield_star_outline", 0xF113C),
    ("md_shield_sun", 0xF105D),
    ("md_shield_sun_outline", 0xF105E),
    ("md_shield_sword", 0xF18BE),
    ("md_shield_sword_outline", 0xF18BF),
    ("md_shield_sync", 0xF11A2),
    ("md_shield_sync_outline", 0xF11A3),
    ("md_shimmer", 0xF1545),
    ("md_ship_wheel", 0xF0833),
    ("md_shipping_pallet", 0xF184E),
    ("md_shoe_ballet", 0xF15CA),
    ("md_shoe_cleat", 0xF15C7),
    ("md_shoe_formal", 0xF0B47),
    ("md_shoe_heel", 0xF0B48),
    ("md_shoe_print", 0xF0DFA),
    ("md_shoe_sneaker", 0xF15C8),
    ("md_shopping", 0xF049A),
    ("md_shopping_music", 0xF049B),
    ("md_shopping_outline", 0xF11D5),
    ("md_shopping_search", 0xF0F84),
    ("md_shopping_search_outline", 0xF1A6F),
    ("md_shore", 0xF14F9),
    ("md_shovel", 0xF0710),
    ("md_shovel_off", 0xF0711),
    ("md_shower", 0xF09A0),
    ("md_shower_head", 0xF09A1),
    ("md_shredder", 0xF049C),
    ("md_shuffle", 0xF049D),
    ("md_shuffle_disabled", 0xF049E),
    ("md_shuffle_variant", 0xF049F),
    ("md_shuriken", 0xF137F),
    ("md_sickle", 0xF18C0),
    ("md_sigma", 0xF04A0),
    ("md_sigma_lower", 0xF062B),
    ("md_sign_caution", 0xF04A1),
    ("md_sign_direction", 0xF0781),
    ("md_sign_direction_minus", 0xF1000),
    ("md_sign_direction_plus", 0xF0FDC),
    ("md_sign_direction_remove", 0xF0FDD),
    ("md_sign_pole", 0xF14F8),
    ("md_sign_real_estate", 0xF1118),
    ("md_sign_text", 0xF0782),
    ("md_signal", 0xF04A2),
    ("md_signal_2g", 0xF0712),
    ("md_signal_3g", 0xF0713),
    ("md_signal_4g", 0xF0714),
    ("md_signal_5g", 0xF0A6F),
    ("md_signal_cellular_1", 0xF08BC),
    ("md_signal_cellular_2", 0xF08BD),
    ("md_signal_cellular_3", 0xF08BE),
    ("md_signal_cellular_outline", 0xF08BF),
    ("md_signal_distance_variant", 0xF0E64),
    ("md_signal_hspa", 0xF0715),
    ("md_signal_hspa_plus", 0xF0716),
    ("md_signal_off", 0xF0783),
    ("md_signal_variant", 0xF060A),
    ("md_signature", 0xF0DFB),
    ("md_signature_freehand", 0xF0DFC),
    ("md_signature_image", 0xF0DFD),
    ("md_signature_text", 0xF0DFE),
    ("md_silo", 0xF0B49),
    ("md_silverware", 0xF04A3),
    ("md_silverware_clean", 0xF0FDE),
    ("md_silverware_fork", 0xF04A4),
    ("md_silverware_fork_knife", 0xF0A70),
    ("md_silverware_spoon", 0xF04A5),
    ("md_silverware_variant", 0xF04A6),
    ("md_sim", 0xF04A7),
    ("md_sim_alert", 0xF04A8),
    ("md_sim_alert_outline", 0xF15D3),
    ("md_sim_off", 0xF04A9),
    ("md_sim_off_outline", 0xF15D4),
    ("md_sim_outline", 0xF15D5),
    ("md_simple_icons", 0xF131D),
    ("md_sina_weibo", 0xF0ADF),
    ("md_sine_wave", 0xF095B),
    ("md_sitemap", 0xF04AA),
    ("md_sitemap_outline", 0xF199C),
    ("md_size_m", 0xF13A5),
    ("md_size_s", 0xF13A4),
    ("md_size_xl", 0xF13A7),
    ("md_size_xs", 0xF13A3),
    ("md_size_xxl", 0xF13A8),
    ("md_size_xxs", 0xF13A2),
    ("md_size_xxxl", 0xF13A9),
    ("md_skate", 0xF0D35),
    ("md_skate_off", 0xF0699),
    ("md_skateboard", 0xF14C2),
    ("md_skateboarding", 0xF0501),
    ("md_skew_less", 0xF0D36),
    ("md_skew_more", 0xF0D37),
    ("md_ski", 0xF1304),
    ("md_ski_cross_country", 0xF1305),
    ("md_ski_water", 0xF1306),
    ("md_skip_backward", 0xF04AB),
    ("md_skip_backward_outline", 0xF0F25),
    ("md_skip_forward", 0xF04AC),
    ("md_skip_forward_outline", 0xF0F26),
    ("md_skip_next", 0xF04AD),
    ("md_skip_next_circle", 0xF0661),
    ("md_skip_next_circle_outline", 0xF0662),
    ("md_skip_next_outline", 0xF0F27),
    ("md_skip_previous", 0xF04AE),
    ("md_skip_previous_circle", 0xF0663),
    ("md_skip_previous_circle_outline", 0xF0664),
    ("md_skip_previous_outline", 0xF0F28),
    ("md_skull", 0xF068C),
    ("md_skull_crossbones", 0xF0BC6),
    ("md_skull_crossbones_outline", 0xF0BC7),
    ("md_skull_outline", 0xF0BC8),
    ("md_skull_scan", 0xF14C7),
    ("md_skull_scan_outline", 0xF14C8),
    ("md_skype", 0xF04AF),
    ("md_skype_business", 0xF04B0),
    ("md_slack", 0xF04B1),
    ("md_slash_forward", 0xF0FDF),
    ("md_slash_forward_box", 0xF0FE0),
    ("md_sledding", 0xF041B),
    ("md_sleep", 0xF04B2),
    ("md_sleep_off", 0xF04B3),
    ("md_slide", 0xF15A5),
    ("md_slope_downhill", 0xF0DFF),
    ("md_slope_uphill", 0xF0E00),
    ("md_slot_machine", 0xF1114),
    ("md_slot_machine_outline", 0xF1115),
    ("md_smart_card", 0xF10BD),
    ("md_smart_card_off", 0xF18F7),
    ("md_smart_card_off_outline", 0xF18F8),
    ("md_smart_card_outline", 0xF10BE),
    ("md_smart_card_reader", 0xF10BF),
    ("md_smart_card_reader_outline", 0xF10C0),
    ("md_smog", 0xF0A71),
    ("md_smoke", 0xF1799),
    ("md_smoke_detector", 0xF0392),
    ("md_smoke_detector_alert", 0xF192E),
    ("md_smoke_detector_alert_outline", 0xF192F),
    ("md_smoke_detector_off", 0xF1809),
    ("md_smoke_detector_off_outline", 0xF180A),
    ("md_smoke_detector_outline", 0xF1808),
    ("md_smoke_detector_variant", 0xF180B),
    ("md_smoke_detector_variant_alert", 0xF1930),
    ("md_smoke_detector_variant_off", 0xF180C),
    ("md_smoking", 0xF04B4),
    ("md_smoking_off", 0xF04B5),
    ("md_smoking_pipe", 0xF140D),
    ("md_smoking_pipe_off", 0xF1428),
    ("md_snail", 0xF1677),
    ("md_snake", 0xF150E),
    ("md_snapchat", 0xF04B6),
    ("md_snowboard", 0xF1307),
    ("md_snowflake", 0xF0717),
    ("md_snowflake_alert", 0xF0F29),
    ("md_snowflake_check", 0xF1A70),
    ("md_snowflake_melt", 0xF12CB),
    ("md_snowflake_off", 0xF14E3),
    ("md_snowflake_thermometer", 0xF1A71),
    ("md_snowflake_variant", 0xF0F2A),
    ("md_snowman", 0xF04B7),
    ("md_snowmobile", 0xF06DD),
    ("md_snowshoeing", 0xF1A72),
    ("md_soccer", 0xF04B8),
    ("md_soccer_field", 0xF0834),
    ("md_social_distance_2_meters", 0xF1579),
    ("md_social_distance_6_feet", 0xF157A),
    ("md_sofa", 0xF04B9),
    ("md_sofa_outline", 0xF156D),
    ("md_sofa_single", 0xF156E),
    ("md_sofa_single_outline", 0xF156F),
    ("md_solar_panel", 0xF0D9B),
    ("md_solar_panel_large", 0xF0D9C),
    ("md_solar_power", 0xF0A72),
    ("md_solar_power_variant", 0xF1A73),
    ("md_solar_power_variant_outline", 0xF1A74),
    ("md_soldering_iron", 0xF1092),
    ("md_solid", 0xF068D),
    ("md_sony_playstation", 0xF0414),
    ("md_sort", 0xF04BA),
    ("md_sort_alphabetical_ascending", 0xF05BD),
    ("md_sort_alphabetical_ascending_variant", 0xF1148),
    ("md_sort_alphabetical_descending", 0xF05BF),
    ("md_sort_alphabetical_descending_variant", 0xF1149),
    ("md_sort_alphabetical_variant", 0xF04BB),
    ("md_sort_ascending", 0xF04BC),
    ("md_sort_bool_ascending", 0xF1385),
    ("md_sort_bool_ascending_variant", 0xF1386),
    ("md_sort_bool_descending", 0xF1387),
    ("md_sort_bool_descending_variant", 0xF1388),
    ("md_sort_calendar_ascending", 0xF1547),
    ("md_sort_calendar_descending", 0xF1548),
    ("md_sort_clock_ascending", 0xF1549),
    ("md_sort_clock_ascending_outline", 0xF154A),
    ("md_sort_clock_descending", 0xF154B),
    ("md_sort_clock_descending_outline", 0xF154C),
    ("md_sort_descending", 0xF04BD),
    ("md_sort_numeric_ascending", 0xF1389),
    ("md_sort_numeric_ascending_variant", 0xF090D),
    ("md_sort_numeric_descending", 0xF138A),
    ("md_sort_numeric_descending_variant", 0xF0AD2),
    ("md_sort_numeric_variant", 0xF04BE),
    ("md_sort_reverse_variant", 0xF033C),
    ("md_sort_variant", 0xF04BF),
    ("md_sort_variant_lock", 0xF0CCD),
    ("md_sort_variant_lock_open", 0xF0CCE),
    ("md_sort_variant_off", 0xF1ABB),
    ("md_sort_variant_remove", 0xF1147),
    ("md_soundbar", 0xF17DB),
    ("md_soundcloud", 0xF04C0),
    ("md_source_branch", 0xF062C),
    ("md_source_branch_check", 0xF14CF),
    ("md_source_branch_minus", 0xF14CB),
    ("md_source_branch_plus", 0xF14CA),
    ("md_source_branch_refresh", 0xF14CD),
    ("md_source_branch_remove", 0xF14CC),
    ("md_source_branch_sync", 0xF14CE),
    ("md_source_commit", 0xF0718),
    ("md_source_commit_end", 0xF0719),
    ("md_source_commit_end_local", 0xF071A),
    ("md_source_commit_local", 0xF071B),
    ("md_source_commit_next_local", 0xF071C),
    ("md_source_commit_start", 0xF071D),
    ("md_source_commit_start_next_local", 0xF071E),
    ("md_source_fork", 0xF04C1),
    ("md_source_merge", 0xF062D),
    ("md_source_pull", 0xF04C2),
    ("md_source_repository", 0xF0CCF),
    ("md_source_repository_multiple", 0xF0CD0),
    ("md_soy_sauce", 0xF07EE),
    ("md_soy_sauce_off", 0xF13FC),
    ("md_spa", 0xF0CD1),
    ("md_spa_outline", 0xF0CD2),
    ("md_space_invaders", 0xF0BC9),
    ("md_space_station", 0xF1383),
    ("md_spade", 0xF0E65),
    ("md_speaker", 0xF04C3),
    ("md_speaker_bluetooth", 0xF09A2),
    ("md_speaker_multiple", 0xF0D38),
    ("md_speaker_off", 0xF04C4),
    ("md_speaker_wireless", 0xF071F),
    ("md_spear", 0xF1845),
    ("md_speedometer", 0xF04C5),
    ("md_speedometer_medium", 0xF0F85),
    ("md_speedometer_slow", 0xF0F86),
    ("md_spellcheck", 0xF04C6),
    ("md_sphere", 0xF1954),
    ("md_sphere_off", 0xF1955),
    ("md_spider", 0xF11EA),
    ("md_spider_thread", 0xF11EB),
    ("md_spider_web", 0xF0BCA),
    ("md_spirit_level", 0xF14F1),
    ("md_spoon_sugar", 0xF1429),
    ("md_spotify", 0xF04C7),
    ("md_spotlight", 0xF04C8),
    ("md_spotlight_beam", 0xF04C9),
    ("md_spray", 0xF0665),
    ("md_spray_bottle", 0xF0AE0),
    ("md_sprinkler", 0xF105F),
    ("md_sprinkler_fire", 0xF199D),
    ("md_sprinkler_variant", 0xF1060),
    ("md_sprout", 0xF0E66),
    ("md_sprout_outline", 0xF0E67),
    ("md_square", 0xF0764),
    ("md_square_circle", 0xF1500),
    ("md_square_edit_outline", 0xF090C),
    ("md_square_medium", 0xF0A13),
    ("md_square_medium_outline", 0xF0A14),
    ("md_square_off", 0xF12EE),
    ("md_square_off_outline", 0xF12EF),
    ("md_square_opacity", 0xF1854),
    ("md_square_outline", 0xF0763),
    ("md_square_root", 0xF0784),
    ("md_square_root_box", 0xF09A3),
    ("md_square_rounded", 0xF14FB),
    ("md_square_rounded_badge", 0xF1A07),
    ("md_square_rounded_badge_outline", 0xF1A08),
    ("md_square_rounded_outline", 0xF14FC),
    ("md_square_small", 0xF0A15),
    ("md_square_wave", 0xF147B),
    ("md_squeegee", 0xF0AE1),
    ("md_ssh", 0xF08C0),
    ("md_stack_exchange", 0xF060B),
    ("md_stack_overflow", 0xF04CC),
    ("md_stackpath", 0xF0359),
    ("md_stadium", 0xF0FF9),
    ("md_stadium_variant", 0xF0720),
    ("md_stairs", 0xF04CD),
    ("md_stairs_box", 0xF139E),
    ("md_stairs_down", 0xF12BE),
    ("md_stairs_up", 0xF12BD),
    ("md_stamper", 0xF0D39),
    ("md_standard_definition", 0xF07EF),
    ("md_star", 0xF04CE),
    ("md_star_box", 0xF0A73),
    ("md_star_box_multiple", 0xF1286),
    ("md_star_box_multiple_outline", 0xF1287),
    ("md_star_box_outline", 0xF0A74),
    ("md_star_check", 0xF1566),
    ("md_star_check_outline", 0xF156A),
    ("md_star_circle", 0xF04CF),
    ("md_star_circle_outline", 0xF09A4),
    ("md_star_cog", 0xF1668),
    ("md_star_cog_outline", 0xF1669),
    ("md_star_crescent", 0xF0979),
    ("md_star_david", 0xF097A),
    ("md_star_face", 0xF09A5),
    ("md_star_four_points", 0xF0AE2),
    ("md_star_four_points_outline", 0xF0AE3),
    ("md_star_half", 0xF0246),
    ("md_star_half_full", 0xF04D0),
    ("md_star_minus", 0xF1564),
    ("md_star_minus_outline", 0xF1568),
    ("md_star_off", 0xF04D1),
    ("md_star_off_outline", 0xF155B),
    ("md_star_outline", 0xF04D2),
    ("md_star_plus", 0xF1563),
    ("md_star_plus_outline", 0xF1567),
    ("md_star_remove", 0xF1565),
    ("md_star_remove_outline", 0xF1569),
    ("md_star_settings", 0xF166A),
    ("md_star_settings_outline", 0xF166B),
    ("md_star_shooting", 0xF1741),
    ("md_star_shooting_outline", 0xF1742),
    ("md_star_three_points", 0xF0AE4),
    ("md_star_three_points_outline", 0xF0AE5),
    ("md_state_machine", 0xF11EF),
    ("md_steam", 0xF04D3),
    ("md_steering", 0xF04D4),
    ("md_steering_off", 0xF090E),
    ("md_step_backward", 0xF04D5),
    ("md_step_backward_2", 0xF04D6),
    ("md_step_forward", 0xF04D7),
    ("md_step_forward_2", 0xF04D8),
    ("md_stethoscope", 0xF04D9),
    ("md_sticker", 0xF1364),
    ("md_sticker_alert", 0xF1365),
    ("md_sticker_alert_outline", 0xF1366),
    ("md_sticker_check", 0xF1367),
    ("md_sticker_check_outline", 0xF1368),
    ("md_sticker_circle_outline", 0xF05D0),
    ("md_sticker_emoji", 0xF0785),
    ("md_sticker_minus", 0xF1369),
    ("md_sticker_minus_outline", 0xF136A),
    ("md_sticker_outline", 0xF136B),
    ("md_sticker_plus", 0xF136C),
    ("md_sticker_plus_outline", 0xF136D),
    ("md_sticker_remove", 0xF136E),
    ("md_sticker_remove_outline", 0xF136F),
    ("md_sticker_text", 0xF178E),
    ("md_sticker_text_outline", 0xF178F),
    ("md_stocking", 0xF04DA),
    ("md_stomach", 0xF1093),
    ("md_stool", 0xF195D),
    ("md_stool_outline", 0xF195E),
    ("md_stop", 0xF04DB),
    ("md_stop_circle", 0xF0666),
    ("md_stop_circle_outline", 0xF0667),
    ("md_storage_tank", 0xF1A75),
    ("md_storage_tank_outline", 0xF1A76),
    ("md_store", 0xF04DC),
    ("md_store_24_hour", 0xF04DD),
    ("md_store_alert", 0xF18C1),
    ("md_store_alert_outline", 0xF18C2),
    ("md_store_check", 0xF18C3),
    ("md_store_check_outline", 0xF18C4),
    ("md_store_clock", 0xF18C5),
    ("md_store_clock_outline", 0xF18C6),
    ("md_store_cog", 0xF18C7),
    ("md_store_cog_outline", 0xF18C8),
    ("md_store_edit", 0xF18C9),
    ("md_store_edit_outline", 0xF18CA),
    ("md_store_marker", 0xF18CB),
    ("md_store_marker_outline", 0xF18CC),
    ("md_store_minus", 0xF165E),
    ("md_store_minus_outline", 0xF18CD),
    ("md_store_off", 0xF18CE),
    ("md_store_off_outline", 0xF18CF),
    ("md_store_outline", 0xF1361),
    ("md_store_plus", 0xF165F),
    ("md_store_plus_outline", 0xF18D0),
    ("md_store_remove", 0xF1660),
    ("md_store_remove_outline", 0xF18D1),
    ("md_store_search", 0xF18D2),
    ("md_store_search_outline", 0xF18D3),
    ("md_store_settings", 0xF18D4),
    ("md_store_settings_outline", 0xF18D5),
    ("md_storefront", 0xF07C7),
    ("md_storefront_outline", 0xF10C1),
    ("md_stove", 0xF04DE),
    ("md_strategy", 0xF11D6),
    ("md_stretch_to_page", 0xF0F2B),
    ("md_stretch_to_page_outline", 0xF0F2C),
    ("md_string_lights", 0xF12BA),
    ("md_string_lights_off", 0xF12BB),
    ("md_subdirectory_arrow_left", 0xF060C),
    ("md_subdirectory_arrow_right", 0xF060D),
    ("md_submarine", 0xF156C),
    ("md_subtitles", 0xF0A16),
    ("md_subtitles_outline", 0xF0A17),
    ("md_subway", 0xF06AC),
    ("md_subway_alert_variant", 0xF0D9D),
    ("md_subway_variant", 0xF04DF),
    ("md_summit", 0xF0786),
    ("md_sun_clock", 0xF1A77),
    ("md_sun_clock_outline", 0xF1A78),
    ("md_sun_compass", 0xF19A5),
    ("md_sun_snowflake", 0xF1796),
    ("md_sun_snowflake_variant", 0xF1A79),
    ("md_sun_thermometer", 0xF18D6),
    ("md_sun_thermometer_outline", 0xF18D7),
    ("md_sun_wireless", 0xF17FE),
    ("md_sun_wireless_outline", 0xF17FF),
    ("md_sunglasses", 0xF04E0),
    ("md_surfing", 0xF1746),
    ("md_surround_sound", 0xF05C5),
    ("md_surround_sound_2_0", 0xF07F0),
    ("md_surround_sound_2_1", 0xF1729),
    ("md_surround_sound_3_1", 0xF07F1),
    ("md_surround_sound_5_1", 0xF07F2),
    ("md_surround_sound_5_1_2", 0xF172A),
    ("md_surround_sound_7_1", 0xF07F3),
    ("md_svg", 0xF0721),
    ("md_swap_horizontal", 0xF04E1),
    ("md_swap_horizontal_bold", 0xF0BCD),
    ("md_swap_horizontal_circle", 0xF0FE1),
    ("md_swap_horizontal_circle_outline", 0xF0FE2),
    ("md_swap_horizontal_variant", 0xF08C1),
    ("md_swap_vertical", 0xF04E2),
    ("md_swap_vertical_bold", 0xF0BCE),
    ("md_swap_vertical_circle", 0xF0FE3),
    ("md_swap_vertical_circle_outline", 0xF0FE4),
    ("md_swap_vertical_variant", 0xF08C2),
    ("md_swim", 0xF04E3),
    ("md_switch", 0xF04E4),
    ("md_sword", 0xF04E5),
    ("md_sword_cross", 0xF0787),
    ("md_syllabary_hangul", 0xF1333),
    ("md_syllabary_hiragana", 0xF1334),
    ("md_syllabary_katakana", 0xF1335),
    ("md_syllabary_katakana_halfwidth", 0xF1336),
    ("md_symbol", 0xF1501),
    ("md_symfony", 0xF0AE6),
    ("md_sync", 0xF04E6),
    ("md_sync_alert", 0xF04E7),
    ("md_sync_circle", 0xF1378),
    ("md_sync_off", 0xF04E8),
    ("md_tab", 0xF04E9),
    ("md_tab_minus", 0xF0B4B),
    ("md_tab_plus", 0xF075C),
    ("md_tab_remove", 0xF0B4C),
    ("md_tab_search", 0xF199E),
    ("md_tab_unselected", 0xF04EA),
    ("md_table", 0xF04EB),
    ("md_table_account", 0xF13B9),
    ("md_table_alert", 0xF13BA),
    ("md_table_arrow_down", 0xF13BB),
    ("md_table_arrow_left", 0xF13BC),
    ("md_table_arrow_right", 0xF13BD),
    ("md_table_arrow_up", 0xF13BE),
    ("md_table_border", 0xF0A18),
    ("md_table_cancel", 0xF13BF),
    ("md_table_chair", 0xF1061),
    ("md_table_check", 0xF13C0),
    ("md_table_clock", 0xF13C1),
    ("md_table_cog", 0xF13C2),
    ("md_table_column", 0xF0835),
    ("md_table_column_plus_after", 0xF04EC),
    ("md_table_column_plus_before", 0xF04ED),
    ("md_table_column_remove", 0xF04EE),
    ("md_table_column_width", 0xF04EF),
    ("md_table_edit", 0xF04F0),
    ("md_table_eye", 0xF1094),
    ("md_table_eye_off", 0xF13C3),
    ("md_table_furniture", 0xF05BC),
    ("md_table_headers_eye", 0xF121D),
    ("md_table_headers_eye_off", 0xF121E),
    ("md_table_heart", 0xF13C4),
    ("md_table_key", 0xF13C5),
    ("md_table_large", 0xF04F1),
    ("md_table_large_plus", 0xF0F87),
    ("md_table_large_remove", 0xF0F88),
    ("md_table_lock", 0xF13C6),
    ("md_table_merge_cells", 0xF09A6),
    ("md_table_minus", 0xF13C7),
    ("md_table_multiple", 0xF13C8),
    ("md_table_network", 0xF13C9),
    ("md_table_of_contents", 0xF0836),
    ("md_table_off", 0xF13CA),
    ("md_table_picnic", 0xF1743),
    ("md_table_pivot", 0xF183C),
    ("md_table_plus", 0xF0A75),
    ("md_table_refresh", 0xF13A0),
    ("md_table_remove", 0xF0A76),
    ("md_table_row", 0xF0837),
    ("md_table_row_height", 0xF04F2),
    ("md_table_row_plus_after", 0xF04F3),
    ("md_table_row_plus_before", 0xF04F4),
    ("md_table_row_remove", 0xF04F5),
    ("md_table_search", 0xF090F),
    ("md_table_settings", 0xF0838),
    ("md_table_split_cell", 0xF142A),
    ("md_table_star", 0xF13CB),
    ("md_table_sync", 0xF13A1),
    ("md_table_tennis", 0xF0E68),
    ("md_tablet", 0xF04F6),
    ("md_tablet_android", 0xF04F7),
    ("md_tablet_cellphone", 0xF09A7),
    ("md_tablet_dashboard", 0xF0ECE),
    ("md_taco", 0xF0762),
    ("md_tag", 0xF04F9),
    ("md_tag_arrow_down", 0xF172B),
    ("md_tag_arrow_down_outline", 0xF172C),
    ("md_tag_arrow_left", 0xF172D),
    ("md_tag_arrow_left_outline", 0xF172E),
    ("md_tag_arrow_right", 0xF172F),
    ("md_tag_arrow_right_outline", 0xF1730),
    ("md_tag_arrow_up", 0xF1731),
    ("md_tag_arrow_up_outline", 0xF1732),
    ("md_tag_check", 0xF1A7A),
    ("md_tag_check_outline", 0xF1A7B),
    ("md_tag_faces", 0xF04FA),
    ("md_tag_heart", 0xF068B),
    ("md_tag_heart_outline", 0xF0BCF),
    ("md_tag_minus", 0xF0910),
    ("md_tag_minus_outline", 0xF121F),
    ("md_tag_multiple", 0xF04FB),
    ("md_tag_multiple_outline", 0xF12F7),
    ("md_tag_off", 0xF1220),
    ("md_tag_off_outline", 0xF1221),
    ("md_tag_outline", 0xF04FC),
    ("md_tag_plus", 0xF0722),
    ("md_tag_plus_outline", 0xF1222),
    ("md_tag_remove", 0xF0723),
    ("md_tag_remove_outline", 0xF1223),
    ("md_tag_search", 0xF1907),
    ("md_tag_search_outline", 0xF1908),
    ("md_tag_text", 0xF1224),
    ("md_tag_text_outline", 0xF04FD),
    ("md_tailwind", 0xF13FF),
    ("md_tally_mark_1", 0xF1ABC),
    ("md_tally_mark_2", 0xF1ABD),
    ("md_tally_mark_3", 0xF1ABE),
    ("md_tally_mark_4", 0xF1ABF),
    ("md_tally_mark_5", 0xF1AC0),
    ("md_tangram", 0xF04F8),
    ("md_tank", 0xF0D3A),
    ("md_tanker_truck", 0xF0FE5),
    ("md_tape_drive", 0xF16DF),
    ("md_tape_measure", 0xF0B4D),
    ("md_target", 0xF04FE),
    ("md_target_account", 0xF0BD0),
    ("md_target_variant", 0xF0A77),
    ("md_taxi", 0xF04FF),
    ("md_tea", 0xF0D9E),
    ("md_tea_outline", 0xF0D9F),
    ("md_teamviewer", 0xF0500),
    ("md_teddy_bear", 0xF18FB),
    ("md_telescope", 0xF0B4E),
    ("md_television", 0xF0502),
    ("md_television_ambient_light", 0xF1356),
    ("md_television_box", 0xF0839),
    ("md_television_classic", 0xF07F4),
    ("md_television_classic_off", 0xF083A),
    ("md_television_guide", 0xF0503),
    ("md_television_off", 0xF083B),
    ("md_television_pause", 0xF0F89),
    ("md_television_play", 0xF0ECF),
    ("md_television_shimmer", 0xF1110),
    ("md_television_stop", 0xF0F8A),
    ("md_temperature_celsius", 0xF0504),
    ("md_temperature_fahrenheit", 0xF0505),
    ("md_temperature_kelvin", 0xF0506),
    ("md_tennis", 0xF0DA0),
    ("md_tennis_ball", 0xF0507),
    ("md_tent", 0xF0508),
    ("md_terraform", 0xF1062),
    ("md_test_tube", 0xF0668),
    ("md_test_tube_empty", 0xF0911),
    ("md_test_tube_off", 0xF0912),
    ("md_text", 0xF09A8),
    ("md_text_account", 0xF1570),
    ("md_text_box", 0xF021A),
    ("md_text_box_check", 0xF0EA6),
    ("md_text_box_check_outline", 0xF0EA7),
    ("md_text_box_edit", 0xF1A7C),
    ("md_text_box_edit_outline", 0xF1A7D),
    ("md_text_box_minus", 0xF0EA8),
    ("md_text_box_minus_outline", 0xF0EA9),
    ("md_text_box_multiple", 0xF0AB7),
    ("md_text_box_multiple_outline", 0xF0AB8),
    ("md_text_box_outline", 0xF09ED),
    ("md_text_box_plus", 0xF0EAA),
    ("md_text_box_plus_outline", 0xF0EAB),
    ("md_text_box_remove", 0xF0EAC),
    ("md_text_box_remove_outline", 0xF0EAD),
    ("md_text_box_search", 0xF0EAE),
    ("md_text_box_search_outline", 0xF0EAF),
    ("md_text_long", 0xF09AA),
    ("md_text_recognition", 0xF113D),
    ("md_text_search", 0xF13B8),
    ("md_text_search_variant", 0xF1A7E),
    ("md_text_shadow", 0xF0669),
    ("md_text_short", 0xF09A9),
    ("md_text_to_speech", 0xF050A),
    ("md_text_to_speech_off", 0xF050B),
    ("md_texture", 0xF050C),
    ("md_texture_box", 0xF0FE6),
    ("md_theater", 0xF050D),
    ("md_theme_light_dark", 0xF050E),
    ("md_thermometer", 0xF050F),
    ("md_thermometer_alert", 0xF0E01),
    ("md_thermometer_bluetooth", 0xF1895),
    ("md_thermometer_check", 0xF1A7F),
    ("md_thermometer_chevron_down", 0xF0E02),
    ("md_thermometer_chevron_up", 0xF0E03),
    ("md_thermometer_high", 0xF10C2),
    ("md_thermometer_lines", 0xF0510),
    ("md_thermometer_low", 0xF10C3),
    ("md_thermometer_minus", 0xF0E04),
    ("md_thermometer_off", 0xF1531),
    ("md_thermometer_plus", 0xF0E05),
    ("md_thermometer_water", 0xF1A80),
    ("md_thermostat", 0xF0393),
    ("md_thermostat_box", 0xF0891),
    ("md_thought_bubble", 0xF07F6),
    ("md_thought_bubble_outline", 0xF07F7),
    ("md_thumb_down", 0xF0511),
    ("md_thumb_down_outline", 0xF0512),
    ("md_thumb_up", 0xF0513),
    ("md_thumb_up_outline", 0xF0514),
    ("md_thumbs_up_down", 0xF0515),
    ("md_thumbs_up_down_outline", 0xF1914),
    ("md_ticket", 0xF0516),
    ("md_ticket_account", 0xF0517),
    ("md_ticket_confirmation", 0xF0518),
    ("md_ticket_confirmation_outline", 0xF13AA),
    ("md_ticket_outline", 0xF0913),
    ("md_ticket_percent", 0xF0724),
    ("md_ticket_percent_outline", 0xF142B),
    ("md_tie", 0xF0519),
    ("md_tilde", 0xF0725),
    ("md_tilde_off", 0xF18F3),
    ("md_timelapse", 0xF051A),
    ("md_timeline", 0xF0BD1),
    ("md_timeline_alert", 0xF0F95),
    ("md_timeline_alert_outline", 0xF0F98),
    ("md_timeline_check", 0xF1532),
    ("md_timeline_check_outline", 0xF1533),
    ("md_timeline_clock", 0xF11FB),
    ("md_timeline_clock_outline", 0xF11FC),
    ("md_timeline_help", 0xF0F99),
    ("md_timeline_help_outline", 0xF0F9A),
    ("md_timeline_minus", 0xF1534),
    ("md_timeline_minus_outline", 0xF1535),
    ("md_timeline_outline", 0xF0BD2),
    ("md_timeline_plus", 0xF0F96),
    ("md_timeline_plus_outline", 0xF0F97),
    ("md_timeline_remove", 0xF1536),
    ("md_timeline_remove_outline", 0xF1537),
    ("md_timeline_text", 0xF0BD3),
    ("md_timeline_text_outline", 0xF0BD4),
    ("md_timer", 0xF13AB),
    ("md_timer_10", 0xF051C),
    ("md_timer_3", 0xF051D),
    ("md_timer_alert", 0xF1ACC),
    ("md_timer_alert_outline", 0xF1ACD),
    ("md_timer_cancel", 0xF1ACE),
    ("md_timer_cancel_outline", 0xF1ACF),
    ("md_timer_check", 0xF1AD0),
    ("md_timer_check_outline", 0xF1AD1),
    ("md_timer_cog", 0xF1925),
    ("md_timer_cog_outline", 0xF1926),
    ("md_timer_edit", 0xF1AD2),
    ("md_timer_edit_outline", 0xF1AD3),
    ("md_timer_lock", 0xF1AD4),
    ("md_timer_lock_open", 0xF1AD5),
    ("md_timer_lock_open_outline", 0xF1AD6),
    ("md_timer_lock_outline", 0xF1AD7),
    ("md_timer_marker", 0xF1AD8),
    ("md_timer_marker_outline", 0xF1AD9),
    ("md_timer_minus", 0xF1ADA),
    ("md_timer_minus_outline", 0xF1ADB),
    ("md_timer_music", 0xF1ADC),
    ("md_timer_music_outline", 0xF1ADD),
    ("md_timer_off", 0xF13AC),
    ("md_timer_off_outline", 0xF051E),
    ("md_timer_outline", 0xF051B),
    ("md_timer_pause", 0xF1ADE),
    ("md_timer_pause_outline", 0xF1ADF),
    ("md_timer_play", 0xF1AE0),
    ("md_timer_play_outline", 0xF1AE1),
    ("md_timer_plus", 0xF1AE2),
    ("md_timer_plus_outline", 0xF1AE3),
    ("md_timer_refresh", 0xF1AE4),
    ("md_timer_refresh_outline", 0xF1AE5),
    ("md_timer_remove", 0xF1AE6),
    ("md_timer_remove_outline", 0xF1AE7),
    ("md_timer_sand", 0xF051F),
    ("md_timer_sand_complete", 0xF199F),
    ("md_timer_sand_empty", 0xF06AD),
    ("md_timer_sand_full", 0xF078C),
    ("md_timer_sand_paused", 0xF19A0),
    ("md_timer_settings", 0xF1923),
    ("md_timer_settings_outline", 0xF1924),
    ("md_timer_star", 0xF1AE8),
    ("md_timer_star_outline", 0xF1AE9),
    ("md_timer_stop", 0xF1AEA),
    ("md_timer_stop_outline", 0xF1AEB),
    ("md_timer_sync", 0xF1AEC),
    ("md_timer_sync_outline", 0xF1AED),
    ("md_timetable", 0xF0520),
    ("md_tire", 0xF1896),
    ("md_toaster", 0xF1063),
    ("md_toaster_off", 0xF11B7),
    ("md_toaster_oven", 0xF0CD3),
    ("md_toggle_switch", 0xF0521),
    ("md_toggle_switch_off", 0xF0522),
    ("md_toggle_switch_off_outline", 0xF0A19),
    ("md_toggle_switch_outline", 0xF0A1A),
    ("md_toggle_switch_variant", 0xF1A25),
    ("md_toggle_switch_variant_off", 0xF1A26),
    ("md_toilet", 0xF09AB),
    ("md_toolbox", 0xF09AC),
    ("md_toolbox_outline", 0xF09AD),
    ("md_tools", 0xF1064),
    ("md_tooltip", 0xF0523),
    ("md_tooltip_account", 0xF000C),
    ("md_tooltip_cellphone", 0xF183B),
    ("md_tooltip_check", 0xF155C),
    ("md_tooltip_check_outline", 0xF155D),
    ("md_tooltip_edit", 0xF0524),
    ("md_tooltip_edit_outline", 0xF12C5),
    ("md_tooltip_image", 0xF0525),
    ("md_tooltip_image_outline", 0xF0BD5),
    ("md_tooltip_minus", 0xF155E),
    ("md_tooltip_minus_outline", 0xF155F),
    ("md_tooltip_outline", 0xF0526),
    ("md_tooltip_plus", 0xF0BD6),
    ("md_tooltip_plus_outline", 0xF0527),
    ("md_tooltip_remove", 0xF1560),
    ("md_tooltip_remove_outline", 0xF1561),
    ("md_tooltip_text", 0xF0528),
    ("md_tooltip_text_outline", 0xF0BD7),
    ("md_tooth", 0xF08C3),
    ("md_tooth_outline", 0xF0529),
    ("md_toothbrush", 0xF1129),
    ("md_toothbrush_electric", 0xF112C),
    ("md_toothbrush_paste", 0xF112A),
    ("md_torch", 0xF1606),
    ("md_tortoise", 0xF0D3B),
    ("md_toslink", 0xF12B8),
    ("md_tournament", 0xF09AE),
    ("md_tow_truck", 0xF083C),
    ("md_tower_beach", 0xF0681),
    ("md_tower_fire", 0xF0682),
    ("md_town_hall", 0xF1875),
    ("md_toy_brick", 0xF1288),
    ("md_toy_brick_marker", 0xF1289),
    ("md_toy_brick_marker_outline", 0xF128A),
    ("md_toy_brick_minus", 0xF128B),
    ("md_toy_brick_minus_outline", 0xF128C),
    ("md_toy_brick_outline", 0xF128D),
    ("md_toy_brick_plus", 0xF128E),
    ("md_toy_brick_plus_outline", 0xF128F),
    ("md_toy_brick_remove", 0xF1290),
    ("md_toy_brick_remove_outline", 0xF1291),
    ("md_toy_brick_search", 0xF1292),
    ("md_toy_brick_search_outline", 0xF1293),
    ("md_track_light", 0xF0914),
    ("md_trackpad", 0xF07F8),
    ("md_trackpad_lock", 0xF0933),
    ("md_tractor", 0xF0892),
    ("md_tractor_variant", 0xF14C4),
    ("md_trademark", 0xF0A78),
    ("md_traffic_cone", 0xF137C),
    ("md_traffic_light", 0xF052B),
    ("md_traffic_light_outline", 0xF182A),
    ("md_train", 0xF052C),
    ("md_train_car", 0xF0BD8),
    ("md_train_car_passenger", 0xF1733),
    ("md_train_car_passenger_door", 0xF1734),
    ("md_train_car_passenger_door_open", 0xF1735),
    ("md_train_car_passenger_variant", 0xF1736),
    ("md_train_variant", 0xF08C4),
    ("md_tram", 0xF052D),
    ("md_tram_side", 0xF0FE7),
    ("md_transcribe", 0xF052E),
    ("md_transcribe_close", 0xF052F),
    ("md_transfer", 0xF1065),
    ("md_transfer_down", 0xF0DA1),
    ("md_transfer_left", 0xF0DA2),
    ("md_transfer_right", 0xF0530),
    ("md_transfer_up", 0xF0DA3),
    ("md_transit_connection", 0xF0D3C),
    ("md_transit_connection_horizontal", 0xF1546),
    ("md_transit_connection_variant", 0xF0D3D),
    ("md_transit_detour", 0xF0F8B),
    ("md_transit_skip", 0xF1515),
    ("md_transit_transfer", 0xF06AE),
    ("md_transition", 0xF0915),
    ("md_transition_masked", 0xF0916),
    ("md_translate", 0xF05CA),
    ("md_translate_off", 0xF0E06),
    ("md_transmission_tower", 0xF0D3E),
    ("md_transmission_tower_export", 0xF192C),
    ("md_transmission_tower_import", 0xF192D),
    ("md_transmission_tower_off", 0xF19DD),
    ("md_trash_can", 0xF0A79),
    ("md_trash_can_outline", 0xF0A7A),
    ("md_tray", 0xF1294),
    ("md_tray_alert", 0xF1295),
    ("md_tray_arrow_down", 0xF0120),
    ("md_tray_arrow_up", 0xF011D),
    ("md_tray_full", 0xF1296),
    ("md_tray_minus", 0xF1297),
    ("md_tray_plus", 0xF1298),
    ("md_tray_remove", 0xF1299),
    ("md_treasure_chest", 0xF0726),
    ("md_tree", 0xF0531),
    ("md_tree_outline", 0xF0E69),
    ("md_trello", 0xF0532),
    ("md_trending_down", 0xF0533),
    ("md_trending_neutral", 0xF0534),
    ("md_trending_up", 0xF0535),
    ("md_triangle", 0xF0536),
    ("md_triangle_outline", 0xF0537),
    ("md_triangle_small_down", 0xF1A09),
    ("md_triangle_small_up", 0xF1A0A),
    ("md_triangle_wave", 0xF147C),
    ("md_triforce", 0xF0BD9),
    ("md_trophy", 0xF0538),
    ("md_trophy_award", 0xF0539),
    ("md_trophy_broken", 0xF0DA4),
    ("md_trophy_outline", 0xF053A),
    ("md_trophy_variant", 0xF053B),
    ("md_trophy_variant_outline", 0xF053C),
    ("md_truck", 0xF053D),
    ("md_truck_alert", 0xF19DE),
    ("md_truck_alert_outline", 0xF19DF),
    ("md_truck_cargo_container", 0xF18D8),
    ("md_truck_check", 0xF0CD4),
    ("md_truck_check_outline", 0xF129A),
    ("md_truck_delivery", 0xF053E),
    ("md_truck_delivery_outline", 0xF129B),
    ("md_truck_fast", 0xF0788),
    ("md_truck_fast_outline", 0xF129C),
    ("md_truck_flatbed", 0xF1891),
    ("md_truck_minus", 0xF19AE),
    ("md_truck_minus_outline", 0xF19BD),
    ("md_truck_outline", 0xF129D),
    ("md_truck_plus", 0xF19AD),
    ("md_truck_plus_outline", 0xF19BC),
    ("md_truck_remove", 0xF19AF),
    ("md_truck_remove_outline", 0xF19BE),
    ("md_truck_snowflake", 0xF19A6),
    ("md_truck_trailer", 0xF0727),
    ("md_trumpet", 0xF1096),
    ("md_tshirt_crew", 0xF0A7B),
    ("md_tshirt_crew_outline", 0xF053F),
    ("md_tshirt_v", 0xF0A7C),
    ("md_tshirt_v_outline", 0xF0540),
    ("md_tsunami", 0xF1A81),
    ("md_tumble_dryer", 0xF0917),
    ("md_tumble_dryer_alert", 0xF11BA),
    ("md_tumble_dryer_off", 0xF11BB),
    ("md_tune", 0xF062E),
    ("md_tune_variant", 0xF1542),
    ("md_tune_vertical", 0xF066A),
    ("md_tune_vertical_variant", 0xF1543),
    ("md_tunnel", 0xF183D),
    ("md_tunnel_outline", 0xF183E),
    ("md_turbine", 0xF1A82),
    ("md_turkey", 0xF171B),
    ("md_turnstile", 0xF0CD5),
    ("md_turnstile_outline", 0xF0CD6),
    ("md_turtle", 0xF0CD7),
    ("md_twitch", 0xF0543),
    ("md_twitter", 0xF0544),
    ("md_two_factor_authentication", 0xF09AF),
    ("md_typewriter", 0xF0F2D),
    ("md_ubisoft", 0xF0BDA),
    ("md_ubuntu", 0xF0548),
    ("md_ufo", 0xF10C4),
    ("md_ufo_outline", 0xF10C5),
    ("md_ultra_high_definition", 0xF07F9),
    ("md_umbraco", 0xF0549),
    ("md_umbrella", 0xF054A),
    ("md_umbrella_beach", 0xF188A),
    ("md_umbrella_beach_outline", 0xF188B),
    ("md_umbrella_closed", 0xF09B0),
    ("md_umbrella_closed_outline", 0xF13E2),
    ("md_umbrella_closed_variant", 0xF13E1),
    ("md_umbrella_outline", 0xF054B),
    ("md_undo", 0xF054C),
    ("md_undo_variant", 0xF054D),
    ("md_unfold_less_horizontal", 0xF054E),
    ("md_unfold_less_vertical", 0xF0760),
    ("md_unfold_more_horizontal", 0xF054F),
    ("md_unfold_more_vertical", 0xF0761),
    ("md_ungroup", 0xF0550),
    ("md_unicode", 0xF0ED0),
    ("md_unicorn", 0xF15C2),
    ("md_unicorn_variant", 0xF15C3),
    ("md_unicycle", 0xF15E5),
    ("md_unity", 0xF06AF),
    ("md_unreal", 0xF09B1),
    ("md_update", 0xF06B0),
    ("md_upload", 0xF0552),
    ("md_upload_lock", 0xF1373),
    ("md_upload_lock_outline", 0xF1374),
    ("md_upload_multiple", 0xF083D),
    ("md_upload_network", 0xF06F6),
    ("md_upload_network_outline", 0xF0CD8),
    ("md_upload_off", 0xF10C6),
    ("md_upload_off_outline", 0xF10C7),
    ("md_upload_outline", 0xF0E07),
    ("md_usb", 0xF0553),
    ("md_usb_flash_drive", 0xF129E),
    ("md_usb_flash_drive_outline", 0xF129F),
    ("md_usb_port", 0xF11F0),
    ("md_vacuum", 0xF19A1),
    ("md_vacuum_outline", 0xF19A2),
    ("md_valve", 0xF1066),
    ("md_valve_closed", 0xF1067),
    ("md_valve_open", 0xF1068),
    ("md_van_passenger", 0xF07FA),
    ("md_van_utility", 0xF07FB),
    ("md_vanish", 0xF07FC),
    ("md_vanish_quarter", 0xF1554),
    ("md_vanity_light", 0xF11E1),
    ("md_variable", 0xF0AE7),
    ("md_variable_box", 0xF1111),
    ("md_vector_arrange_above", 0xF0554),
    ("md_vector_arrange_below", 0xF0555),
    ("md_vector_bezier", 0xF0AE8),
    ("md_vector_circle", 0xF0556),
    ("md_vector_circle_variant", 0xF0557),
    ("md_vector_combine", 0xF0558),
    ("md_vector_curve", 0xF0559),
    ("md_vector_difference", 0xF055A),
    ("md_vector_difference_ab", 0xF055B),
    ("md_vector_difference_ba", 0xF055C),
    ("md_vector_ellipse", 0xF0893),
    ("md_vector_intersection", 0xF055D),
    ("md_vector_line", 0xF055E),
    ("md_vector_link", 0xF0FE8),
    ("md_vector_point", 0xF055F),
    ("md_vector_polygon", 0xF0560),
    ("md_vector_polygon_variant", 0xF1856),
    ("md_vector_polyline", 0xF0561),
    ("md_vector_polyline_edit", 0xF1225),
    ("md_vector_polyline_minus", 0xF1226),
    ("md_vector_polyline_plus", 0xF1227),
    ("md_vector_polyline_remove", 0xF1228),
    ("md_vector_radius", 0xF074A),
    ("md_vector_rectangle", 0xF05C6),
    ("md_vector_selection", 0xF0562),
    ("md_vector_square", 0xF0001),
    ("md_vector_square_close", 0xF1857),
    ("md_vector_square_edit", 0xF18D9),
    ("md_vector_square_minus", 0xF18DA),
    ("md_vector_square_open", 0xF1858),
    ("md_vector_square_plus", 0xF18DB),
    ("md_vector_square_remove", 0xF18DC),
    ("md_vector_triangle", 0xF0563),
    ("md_vector_union", 0xF0564),
    ("md_vhs", 0xF0A1B),
    ("md_vibrate", 0xF0566),
    ("md_vibrate_off", 0xF0CD9),
    ("md_video", 0xF0567),
    ("md_video_2d", 0xF1A1C),
    ("md_video_3d", 0xF07FD),
    ("md_video_3d_off", 0xF13D9),
    ("md_video_3d_variant", 0xF0ED1),
    ("md_video_4k_box", 0xF083E),
    ("md_video_account", 0xF0919),
    ("md_video_box", 0xF00FD),
    ("md_video_box_off", 0xF00FE),
    ("md_video_check", 0xF1069),
    ("md_video_check_outline", 0xF106A),
    ("md_video_high_definition", 0xF152E),
    ("md_video_image", 0xF091A),
    ("md_video_input_antenna", 0xF083F),
    ("md_video_input_component", 0xF0840),
    ("md_video_input_hdmi", 0xF0841),
    ("md_video_input_scart", 0xF0F8C),
    ("md_video_input_svideo", 0xF0842),
    ("md_video_marker", 0xF19A9),
    ("md_video_marker_outline", 0xF19AA),
    ("md_video_minus", 0xF09B2),
    ("md_video_minus_outline", 0xF02BA),
    ("md_video_off", 0xF0568),
    ("md_video_off_outline", 0xF0BDB),
    ("md_video_outline", 0xF0BDC),
    ("md_video_plus", 0xF09B3),
    ("md_video_plus_outline", 0xF01D3),
    ("md_video_stabilization", 0xF091B),
    ("md_video_switch", 0xF0569),
    ("md_video_switch_outline", 0xF0790),
    ("md_video_vintage", 0xF0A1C),
    ("md_video_wireless", 0xF0ED2),
    ("md_video_wireless_outline", 0xF0ED3),
    ("md_view_agenda", 0xF056A),
    ("md_view_agenda_outline", 0xF11D8),
    ("md_view_array", 0xF056B),
    ("md_view_array_outline", 0xF1485),
    ("md_view_carousel", 0xF056C),
    ("md_view_carousel_outline", 0xF1486),
    ("md_view_column", 0xF056D),
    ("md_view_column_outline", 0xF1487),
    ("md_view_comfy", 0xF0E6A),
    ("md_view_comfy_outline", 0xF1488),
    ("md_view_compact", 0xF0E6B),
    ("md_view_compact_outline", 0xF0E6C),
    ("md_view_dashboard", 0xF056E),
    ("md_view_dashboard_edit", 0xF1947),
    ("md_view_dashboard_edit_outline", 0xF1948),
    ("md_view_dashboard_outline", 0xF0A1D),
    ("md_view_dashboard_variant", 0xF0843),
    ("md_view_dashboard_variant_outline", 0xF1489),
    ("md_view_day", 0xF056F),
    ("md_view_day_outline", 0xF148A),
    ("md_view_gallery", 0xF1888),
    ("md_view_gallery_outline", 0xF1889),
    ("md_view_grid", 0xF0570),
    ("md_view_grid_outline", 0xF11D9),
    ("md_view_grid_plus", 0xF0F8D),
    ("md_view_grid_plus_outline", 0xF11DA),
    ("md_view_headline", 0xF0571),
    ("md_view_list", 0xF0572),
    ("md_view_list_outline", 0xF148B),
    ("md_view_module", 0xF0573),
    ("md_view_module_outline", 0xF148C),
    ("md_view_parallel", 0xF0728),
    ("md_view_parallel_outline", 0xF148D),
    ("md_view_quilt", 0xF0574),
    ("md_view_quilt_outline", 0xF148E),
    ("md_view_sequential", 0xF0729),
    ("md_view_sequential_outline", 0xF148F),
    ("md_view_split_horizontal", 0xF0BCB),
    ("md_view_split_vertical", 0xF0BCC),
    ("md_view_stream", 0xF0575),
    ("md_view_stream_outline", 0xF1490),
    ("md_view_week", 0xF0576),
    ("md_view_week_outline", 0xF1491),
    ("md_vimeo", 0xF0577),
    ("md_violin", 0xF060F),
    ("md_virtual_reality", 0xF0894),
    ("md_virus", 0xF13B6),
    ("md_virus_off", 0xF18E1),
    ("md_virus_off_outline", 0xF18E2),
    ("md_virus_outline", 0xF13B7),
    ("md_vlc", 0xF057C),
    ("md_voicemail", 0xF057D),
    ("md_volcano", 0xF1A83),
    ("md_volcano_outline", 0xF1A84),
    ("md_volleyball", 0xF09B4),
    ("md_volume_high", 0xF057E),
    ("md_volume_low", 0xF057F),
    ("md_volume_medium", 0xF0580),
    ("md_volume_minus", 0xF075E),
    ("md_volume_mute", 0xF075F),
    ("md_volume_off", 0xF0581),
    ("md_volume_plus", 0xF075D),
    ("md_volume_source", 0xF1120),
    ("md_volume_variant_off", 0xF0E08),
    ("md_volume_vibrate", 0xF1121),
    ("md_vote", 0xF0A1F),
    ("md_vote_outline", 0xF0A20),
    ("md_vpn", 0xF0582),
    ("md_vuejs", 0xF0844),
    ("md_vuetify", 0xF0E6D),
    ("md_walk", 0xF0583),
    ("md_wall", 0xF07FE),
    ("md_wall_fire", 0xF1A11),
    ("md_wall_sconce", 0xF091C),
    ("md_wall_sconce_flat", 0xF091D),
    ("md_wall_sconce_flat_outline", 0xF17C9),
    ("md_wall_sconce_flat_variant", 0xF041C),
    ("md_wall_sconce_flat_variant_outline", 0xF17CA),
    ("md_wall_sconce_outline", 0xF17CB),
    ("md_wall_sconce_round", 0xF0748),
    ("md_wall_sconce_round_outline", 0xF17CC),
    ("md_wall_sconce_round_variant", 0xF091E),
    ("md_wall_sconce_round_variant_outline", 0xF17CD),
    ("md_wallet", 0xF0584),
    ("md_wallet_giftcard", 0xF0585),
    ("md_wallet_membership", 0xF0586),
    ("md_wallet_outline", 0xF0BDD),
    ("md_wallet_plus", 0xF0F8E),
    ("md_wallet_plus_outline", 0xF0F8F),
    ("md_wallet_travel", 0xF0587),
    ("md_wallpaper", 0xF0E09),
    ("md_wan", 0xF0588),
    ("md_wardrobe", 0xF0F90),
    ("md_wardrobe_outline", 0xF0F91),
    ("md_warehouse", 0xF0F81),
    ("md_washing_machine", 0xF072A),
    ("md_washing_machine_alert", 0xF11BC),
    ("md_washing_machine_off", 0xF11BD),
    ("md_watch", 0xF0589),
    ("md_watch_export", 0xF058A),
    ("md_watch_export_variant", 0xF0895),
    ("md_watch_import", 0xF058B),
    ("md_watch_import_variant", 0xF0896),
    ("md_watch_variant", 0xF0897),
    ("md_watch_vibrate", 0xF06B1),
    ("md_watch_vibrate_off", 0xF0CDA),
    ("md_water", 0xF058C),
    ("md_water_alert", 0xF1502),
    ("md_water_alert_outline", 0xF1503),
    ("md_water_boiler", 0xF0F92),
    ("md_water_boiler_alert", 0xF11B3),
    ("md_water_boiler_off", 0xF11B4),
    ("md_water_check", 0xF1504),
    ("md_water_check_outline", 0xF1505),
    ("md_water_circle", 0xF1806),
    ("md_water_minus", 0xF1506),
    ("md_water_minus_outline", 0xF1507),
    ("md_water_off", 0xF058D),
    ("md_water_off_outline", 0xF1508),
    ("md_water_opacity", 0xF1855),
    ("md_water_outline", 0xF0E0A),
    ("md_water_percent", 0xF058E),
    ("md_water_percent_alert", 0xF1509),
    ("md_water_plus", 0xF150A),
    ("md_water_plus_outline", 0xF150B),
    ("md_water_polo", 0xF12A0),
    ("md_water_pump", 0xF058F),
    ("md_water_pump_off", 0xF0F93),
    ("md_water_remove", 0xF150C),
    ("md_water_remove_outline", 0xF150D),
    ("md_water_sync", 0xF17C6),
    ("md_water_thermometer", 0xF1A85),
    ("md_water_thermometer_outline", 0xF1A86),
    ("md_water_well", 0xF106B),
    ("md_water_well_outline", 0xF106C),
    ("md_waterfall", 0xF1849),
    ("md_watering_can", 0xF1481),
    ("md_watering_can_outline", 0xF1482),
    ("md_watermark", 0xF0612),
    ("md_wave", 0xF0F2E),
    ("md_waveform", 0xF147D),
    ("md_waves", 0xF078D),
    ("md_waves_arrow_left", 0xF1859),
    ("md_waves_arrow_right", 0xF185A),
    ("md_waves_arrow_up", 0xF185B),
    ("md_waze", 0xF0BDE),
    ("md_weather_cloudy", 0xF0590),
    ("md_weather_cloudy_alert", 0xF0F2F),
    ("md_weather_cloudy_arrow_right", 0xF0E6E),
    ("md_weather_cloudy_clock", 0xF18F6),
    ("md_weather_fog", 0xF0591),
    ("md_weather_hail", 0xF0592),
    ("md_weather_hazy", 0xF0F30),
    ("md_weather_hurricane", 0xF0898),
    ("md_weather_lightning", 0xF0593),
    ("md_weather_lightning_rainy", 0xF067E),
    ("md_weather_night", 0xF0594),
    ("md_weather_night_partly_cloudy", 0xF0F31),
    ("md_weather_partly_cloudy", 0xF0595),
    ("md_weather_partly_lightning", 0xF0F32),
    ("md_weather_partly_rainy", 0xF0F33),
    ("md_weather_partly_snowy", 0xF0F34),
    ("md_weather_partly_snowy_rainy", 0xF0F35),
    ("md_weather_pouring", 0xF0596),
    ("md_weather_rainy", 0xF0597),
    ("md_weather_snowy", 0xF0598),
    ("md_weather_snowy_heavy", 0xF0F36),
    ("md_weather_snowy_rainy", 0xF067F),
    ("md_weather_sunny", 0xF0599),
    ("md_weather_sunny_alert", 0xF0F37),
    ("md_weather_sunny_off", 0xF14E4),
    ("md_weather_sunset", 0xF059A),
    ("md_weather_sunset_down", 0xF059B),
    ("md_weather_sunset_up", 0xF059C),
    ("md_weather_tornado", 0xF0F38),
    ("md_weather_windy", 0xF059D),
    ("md_weather_windy_variant", 0xF059E),
    ("md_web", 0xF059F),
    ("md_web_box", 0xF0F94),
    ("md_web_cancel", 0xF1790),
    ("md_web_check", 0xF0789),
    ("md_web_clock", 0xF124A),
    ("md_web_minus", 0xF10A0),
    ("md_web_off", 0xF0A8E),
    ("md_web_plus", 0xF0033),
    ("md_web_refresh", 0xF1791),
    ("md_web_remove", 0xF0551),
    ("md_web_sync", 0xF1792),
    ("md_webcam", 0xF05A0),
    ("md_webcam_off", 0xF1737),
    ("md_webhook", 0xF062F),
    ("md_webpack", 0xF072B),
    ("md_webrtc", 0xF1248),
    ("md_wechat", 0xF0611),
    ("md_weight", 0xF05A1),
    ("md_weight_gram", 0xF0D3F),
    ("md_weight_kilogram", 0xF05A2),
    ("md_weight_lifter", 0xF115D),
    ("md_weight_pound", 0xF09B5),
    ("md_whatsapp", 0xF05A3),
    ("md_wheel_barrow", 0xF14F2),
    ("md_wheelchair", 0xF1A87),
    ("md_wheelchair_accessibility", 0xF05A4),
    ("md_whistle", 0xF09B6),
    ("md_whistle_outline", 0xF12BC),
    ("md_white_balance_auto", 0xF05A5),
    ("md_white_balance_incandescent", 0xF05A6),
    ("md_white_balance_iridescent", 0xF05A7),
    ("md_white_balance_sunny", 0xF05A8),
    ("md_widgets", 0xF072C),
    ("md_widgets_outline", 0xF1355),
    ("md_wifi", 0xF05A9),
    ("md_wifi_alert", 0xF16B5),
    ("md_wifi_arrow_down", 0xF16B6),
    ("md_wifi_arrow_left", 0xF16B7),
    ("md_wifi_arrow_left_right", 0xF16B8),
    ("md_wifi_arrow_right", 0xF16B9),
    ("md_wifi_arrow_up", 0xF16BA),
    ("md_wifi_arrow_up_down", 0xF16BB),
    ("md_wifi_cancel", 0xF16BC),
    ("md_wifi_check", 0xF16BD),
    ("md_wifi_cog", 0xF16BE),
    ("md_wifi_lock", 0xF16BF),
    ("md_wifi_lock_open", 0xF16C0),
    ("md_wifi_marker", 0xF16C1),
    ("md_wifi_minus", 0xF16C2),
    ("md_wifi_off", 0xF05AA),
    ("md_wifi_plus", 0xF16C3),
    ("md_wifi_refresh", 0xF16C4),
    ("md_wifi_remove", 0xF16C5),
    ("md_wifi_settings", 0xF16C6),
    ("md_wifi_star", 0xF0E0B),
    ("md_wifi_strength_1", 0xF091F),
    ("md_wifi_strength_1_alert", 0xF0920),
    ("md_wifi_strength_1_lock", 0xF0921),
    ("md_wifi_strength_1_lock_open", 0xF16CB),
    ("md_wifi_strength_2", 0xF0922),
    ("md_wifi_strength_2_alert", 0xF0923),
    ("md_wifi_strength_2_lock", 0xF0924),
    ("md_wifi_strength_2_lock_open", 0xF16CC),
    ("md_wifi_strength_3", 0xF0925),
    ("md_wifi_strength_3_alert", 0xF0926),
    ("md_wifi_strength_3_lock", 0xF0927),
    ("md_wifi_strength_3_lock_open", 0xF16CD),
    ("md_wifi_strength_4", 0xF0928),
    ("md_wifi_strength_4_alert", 0xF0929),
    ("md_wifi_strength_4_lock", 0xF092A),
    ("md_wifi_strength_4_lock_open", 0xF16CE),
    ("md_wifi_strength_alert_outline", 0xF092B),
    ("md_wifi_strength_lock_open_outline", 0xF16CF),
    ("md_wifi_strength_lock_outline", 0xF092C),
    ("md_wifi_strength_off", 0xF092D),
    ("md_wifi_strength_off_outline", 0xF092E),
    ("md_wifi_strength_outline", 0xF092F),
    ("md_wifi_sync", 0xF16C7),
    ("md_wikipedia", 0xF05AC),
    ("md_wind_power", 0xF1A88),
    ("md_wind_power_outline", 0xF1A89),
    ("md_wind_turbine", 0xF0DA5),
    ("md_wind_turbine_alert", 0xF19AB),
    ("md_wind_turbine_check", 0xF19AC),
    ("md_window_close", 0xF05AD),
    ("md_window_closed", 0xF05AE),
    ("md_window_closed_variant", 0xF11DB),
    ("md_window_maximize", 0xF05AF),
    ("md_window_minimize", 0xF05B0),
    ("md_window_open", 0xF05B1),
    ("md_window_open_variant", 0xF11DC),
    ("md_window_restore", 0xF05B2),
    ("md_window_shutter", 0xF111C),
    ("md_window_shutter_alert", 0xF111D),
    ("md_window_shutter_cog", 0xF1A8A),
    ("md_window_shutter_open", 0xF111E),
    ("md_window_shutter_settings", 0xF1A8B),
    ("md_windsock", 0xF15FA),
    ("md_wiper", 0xF0AE9),
    ("md_wiper_wash", 0xF0DA6),
    ("md_wiper_wash_alert", 0xF18DF),
    ("md_wizard_hat", 0xF1477),
    ("md_wordpress", 0xF05B4),
    ("md_wrap", 0xF05B6),
    ("md_wrap_disabled", 0xF0BDF),
    ("md_wrench", 0xF05B7),
    ("md_wrench_clock", 0xF19A3),
    ("md_wrench_outline", 0xF0BE0),
    ("md_xamarin", 0xF0845),
    ("md_xml", 0xF05C0),
    ("md_xmpp", 0xF07FF),
    ("md_yahoo", 0xF0B4F),
    ("md_yeast", 0xF05C1),
    ("md_yin_yang", 0xF0680),
    ("md_yoga", 0xF117C),
    ("md_youtube", 0xF05C3),
    ("md_youtube_gaming", 0xF0848),
    ("md_youtube_studio", 0xF0847),
    ("md_youtube_subscription", 0xF0D40),
    ("md_youtube_tv", 0xF0448),
    ("md_yurt", 0xF1516),
    ("md_z_wave", 0xF0AEA),
    ("md_zend", 0xF0AEB),
    ("md_zigbee", 0xF0D41),
    ("md_zip_box", 0xF05C4),
    ("md_zip_box_outline", 0xF0FFA),
    ("md_zip_disk", 0xF0A23),
    ("md_zodiac_aquarius", 0xF0A7D),
    ("md_zodiac_aries", 0xF0A7E),
    ("md_zodiac_cancer", 0xF0A7F),
    ("md_zodiac_capricorn", 0xF0A80),
    ("md_zodiac_gemini", 0xF0A81),
    ("md_zodiac_leo", 0xF0A82),
    ("md_zodiac_libra", 0xF0A83),
    ("md_zodiac_pisces", 0xF0A84),
    ("md_zodiac_sagittarius", 0xF0A85),
    ("md_zodiac_scorpio", 0xF0A86),
    ("md_zodiac_taurus", 0xF0A87),
    ("md_zodiac_virgo", 0xF0A88),
    ("oct_accessibility", 0xF406),
    ("oct_accessibility_inset", 0xF40B),
    ("oct_alert", 0xF421),
    ("oct_alert_fill", 0xF40C),
    ("oct_apps", 0xF40E),
    ("oct_archive", 0xF411),
    ("oct_arrow_both", 0xF416),
    ("oct_arrow_down", 0xF433),
    ("oct_arrow_down_left", 0xF424),
    ("oct_arrow_down_right", 0xF43E),
    ("oct_arrow_left", 0xF434),
    ("oct_arrow_right", 0xF432),
    ("oct_arrow_switch", 0xF443),
    ("oct_arrow_up", 0xF431),
    ("oct_arrow_up_left", 0xF45C),
    ("oct_arrow_up_right", 0xF46C),
    ("oct_beaker", 0xF499),
    ("oct_bell", 0xF49A),
    ("oct_bell_fill", 0xF476),
    ("oct_bell_slash", 0xF478),
    ("oct_blocked", 0xF479),
    ("oct_bold", 0xF49D),
    ("oct_book", 0xF405),
    ("oct_bookmark", 0xF461),
    ("oct_bookmark_fill", 0xF47A),
    ("oct_bookmark_slash", 0xF533),
    ("oct_bookmark_slash_fill", 0xF493),
    ("oct_briefcase", 0xF491),
    ("oct_broadcast", 0xF43C),
    ("oct_browser", 0xF488),
    ("oct_bug", 0xF46F),
    ("oct_cache", 0xF49B),
    ("oct_calendar", 0xF455),
    ("oct_check", 0xF42E),
    ("oct_check_circle", 0xF49E),
    ("oct_check_circle_fill", 0xF4A4),
    ("oct_checkbox", 0xF4A7),
    ("oct_checklist", 0xF45E),
    ("oct_chevron_down", 0xF47C),
    ("oct_chevron_left", 0xF47D),
    ("oct_chevron_right", 0xF460),
    ("oct_chevron_up", 0xF47B),
    ("oct_circle", 0xF4AA),
    ("oct_circle_slash", 0xF468),
    ("oct_clock", 0xF43A),
    ("oct_clock_fill", 0xF4AB),
    ("oct_cloud", 0xF4AC),
    ("oct_cloud_offline", 0xF4AD),
    ("oct_code", 0xF44F),
    ("oct_code_of_conduct", 0xF4AE),
    ("oct_code_review", 0xF4AF),
    ("oct_code_square", 0xF4B0),
    ("oct_codescan", 0xF4B1),
    ("oct_codescan_checkmark", 0xF4B2),
    ("oct_codespaces", 0xF4B3),
    ("oct_columns", 0xF4B4),
    ("oct_command_palette", 0xF4B5),
    ("oct_comment", 0xF41F),
    ("oct_comment_discussion", 0xF442),
    ("oct_commit", 0xF4B6),
    ("oct_container", 0xF4B7),
    ("oct_copilot", 0xF4B8),
    ("oct_copilot_error", 0xF4B9),
    ("oct_copilot_warning", 0xF4BA),
    ("oct_copy", 0xF4BB),
    ("oct_cpu", 0xF4BC),
    ("oct_credit_card", 0xF439),
    ("oct_cross_reference", 0xF4BD),
    ("oct_dash", 0xF48B),
    ("oct_database", 0xF472),
    ("oct_dependabot", 0xF4BE),
    ("oct_desktop_download", 0xF498),
    ("oct_device_camera", 0xF446),
    ("oct_device_camera_video", 0xF447),
    ("oct_device_desktop", 0xF4A9),
    ("oct_device_mobile", 0xF42C),
    ("oct_diamond", 0xF4BF),
    ("oct_diff", 0xF440),
    ("oct_diff_added", 0xF457),
    ("oct_diff_ignored", 0xF474),
    ("oct_diff_modified", 0xF459),
    ("oct_diff_removed", 0xF458),
    ("oct_diff_renamed", 0xF45A),
    ("oct_discussion_closed", 0xF4C0),
    ("oct_discussion_duplicate", 0xF4C1),
    ("oct_discussion_outdated", 0xF4C2),
    ("oct_dot", 0xF4C3),
    ("oct_dot_fill", 0xF444),
    ("oct_download", 0xF409),
    ("oct_duplicate", 0xF4C4),
    ("oct_ellipsis", 0xF475),
    ("oct_eye", 0xF441),
    ("oct_eye_closed", 0xF4C5),
    ("oct_feed_discussion", 0xF4C6),
    ("oct_feed_forked", 0xF4C7),
    ("oct_feed_heart", 0xF4C8),
    ("oct_feed_merged", 0xF4C9),
    ("oct_feed_person", 0xF4CA),
    ("oct_feed_repo", 0xF4CB),
    ("oct_feed_rocket", 0xF4CC),
    ("oct_feed_star", 0xF4CD),
    ("oct_feed_tag", 0xF4CE),
    ("oct_feed_trophy", 0xF4CF),
    ("oct_file", 0xF4A5),
    ("oct_file_added", 0xF4D0),
    ("oct_file_badge", 0xF4D1),
    ("oct_file_binary", 0xF471),
    ("oct_file_code", 0xF40D),
    ("oct_file_diff", 0xF4D2),
    ("oct_file_directory", 0xF413),
    ("oct_file_directory_fill", 0xF4D3),
    ("oct_file_directory_open_fill", 0xF4D4),
    ("oct_file_media", 0xF40F),
    ("oct_file_moved", 0xF4D5),
    ("oct_file_removed", 0xF4D6),
    ("oct_file_submodule", 0xF414),
    ("oct_file_symlink_directory", 0xF482),
    ("oct_file_symlink_file", 0xF481),
    ("oct_file_zip", 0xF410),
    ("oct_filter", 0xF4D7),
    ("oct_fiscal_host", 0xF4D8),
    ("oct_flame", 0xF490),
    ("oct_fold", 0xF48C),
    ("oct_fold_down", 0xF4D9),
    ("oct_fold_up", 0xF4DA),
    ("oct_gear", 0xF423),
    ("oct_gift", 0xF436),
    ("oct_git_branch", 0xF418),
    ("oct_git_commit", 0xF417),
    ("oct_git_compare", 0xF47F),
    ("oct_git_merge", 0xF419),
    ("oct_git_merge_queue", 0xF4DB),
    ("oct_git_pull_request", 0xF407),
    ("oct_git_pull_request_closed", 0xF4DC),
    ("oct_git_pull_request_draft", 0xF4DD),
    ("oct_globe", 0xF484),
    ("oct_goal", 0xF4DE),
    ("oct_grabber", 0xF4A6),
    ("oct_graph", 0xF437),
    ("oct_hash", 0xF4DF),
    ("oct_heading", 0xF4E0),
    ("oct_heart", 0x2665),
    ("oct_heart_fill", 0xF4E1),
    ("oct_history", 0xF464),
    ("oct_home", 0xF46D),
    ("oct_home_fill", 0xF4E2),
    ("oct_horizontal_rule", 0xF45B),
    ("oct_hourglass", 0xF4E3),
    ("oct_hubot", 0xF477),
    ("oct_id_badge", 0xF4E4),
    ("oct_image", 0xF4E5),
    ("oct_inbox", 0xF48D),
    ("oct_infinity", 0xF4E6),
    ("oct_info", 0xF449),
    ("oct_issue_closed", 0xF41D),
    ("oct_issue_draft", 0xF4E7),
    ("oct_issue_opened", 0xF41B),
    ("oct_issue_reopened", 0xF41C),
    ("oct_issue_tracked_by", 0xF4E8),
    ("oct_issue_tracks", 0xF4E9),
    ("oct_italic", 0xF49F),
    ("oct_iterations", 0xF4EA),
    ("oct_kebab_horizontal", 0xF4EB),
    ("oct_key", 0xF43D),
    ("oct_key_asterisk", 0xF4EC),
    ("oct_law", 0xF495),
    ("oct_light_bulb", 0xF400),
    ("oct_link", 0xF44C),
    ("oct_link_external", 0xF465),
    ("oct_list_ordered", 0xF452),
    ("oct_list_unordered", 0xF451),
    ("oct_location", 0xF450),
    ("oct_lock", 0xF456),
    ("oct_log", 0xF4ED),
    ("oct_logo_gist", 0xF480),
    ("oct_logo_github", 0xF470),
    ("oct_mail", 0xF42F),
    ("oct_mark_github", 0xF408),
    ("oct_markdown", 0xF48A),
    ("oct_megaphone", 0xF45F),
    ("oct_mention", 0xF486),
    ("oct_meter", 0xF463),
    ("oct_milestone", 0xF45D),
    ("oct_mirror", 0xF41A),
    ("oct_moon", 0xF4EE),
    ("oct_mortar_board", 0xF494),
    ("oct_move_to_bottom", 0xF4EF),
    ("oct_move_to_end", 0xF4F0),
    ("oct_move_to_start", 0xF4F1),
    ("oct_move_to_top", 0xF4F2),
    ("oct_multi_select", 0xF4F3),
    ("oct_mute", 0xF466),
    ("oct_no_entry", 0xF4F4),
    ("oct_north_star", 0xF4F5),
    ("oct_note", 0xF4F6),
    ("oct_number", 0xF4F7),
    ("oct_organization", 0xF42B),
    ("oct_package", 0xF487),
    ("oct_package_dependencies", 0xF4F8),
    ("oct_package_dependents", 0xF4F9),
    ("oct_paintbrush", 0xF48F),
    ("oct_paper_airplane", 0xF4FA),
    ("oct_paperclip", 0xF4FB),
    ("oct_passkey_fill", 0xF4FC),
    ("oct_paste", 0xF429),
    ("oct_pencil", 0xF448),
    ("oct_people", 0xF4FD),
    ("oct_person", 0xF415),
    ("oct_person_add", 0xF4FE),
    ("oct_person_fill", 0xF4FF),
    ("oct_pin", 0xF435),
    ("oct_play", 0xF500),
    ("oct_plug", 0xF492),
    ("oct_plus", 0xF44D),
    ("oct_plus_circle", 0xF501),
    ("oct_project", 0xF502),
    ("oct_project_roadmap", 0xF503),
    ("oct_project_symlink", 0xF504),
    ("oct_project_template", 0xF505),
    ("oct_pulse", 0xF469),
    ("oct_question", 0xF420),
    ("oct_quote", 0xF453),
    ("oct_read", 0xF430),
    ("oct_rel_file_path", 0xF506),
    ("oct_reply", 0xF4A8),
    ("oct_repo", 0xF401),
    ("oct_repo_clone", 0xF43F),
    ("oct_repo_deleted", 0xF507),
    ("oct_repo_forked", 0xF402),
    ("oct_repo_locked", 0xF508),
    ("oct_repo_pull", 0xF404),
    ("oct_repo_push", 0xF403),
    ("oct_repo_template", 0xF509),
    ("oct_report", 0xF50A),
    ("oct_rocket", 0xF427),
    ("oct_rows", 0xF50B),
    ("oct_rss", 0xF428),
    ("oct_ruby", 0xF43B),
    ("oct_screen_full", 0xF50C),
    ("oct_screen_normal", 0xF50D),
    ("oct_search", 0xF422),
    ("oct_server", 0xF473),
    ("oct_share", 0xF50E),
    ("oct_share_android", 0xF50F),
    ("oct_shield", 0xF49C),
    ("oct_shield_check", 0xF510),
    ("oct_shield_lock", 0xF511),
    ("oct_shield_slash", 0xF512),
    ("oct_shield_x", 0xF513),
    ("oct_sidebar_collapse", 0xF514),
    ("oct_sidebar_expand", 0xF515),
    ("oct_sign_in", 0xF42A),
    ("oct_sign_out", 0xF426),
    ("oct_single_select", 0xF516),
    ("oct_skip", 0xF517),
    ("oct_skip_fill", 0xF518),
    ("oct_sliders", 0xF462),
    ("oct_smiley", 0xF4A2),
    ("oct_sort_asc", 0xF519),
    ("oct_sort_desc", 0xF51A),
    ("oct_sparkle_fill", 0xF51B),
    ("oct_sponsor_tiers", 0xF51C),
    ("oct_square", 0xF51D),
    ("oct_square_fill", 0xF445),
    ("oct_squirrel", 0xF483),
    ("oct_stack", 0xF51E),
    ("oct_star", 0xF41E),
    ("oct_star_fill", 0xF51F),
    ("oct_stop", 0xF46E),
    ("oct_stopwatch", 0xF520),
    ("oct_strikethrough", 0xF521),
    ("oct_sun", 0xF522),
    ("oct_sync", 0xF46A),
    ("oct_tab", 0xF523),
    ("oct_tab_external", 0xF524),
    ("oct_table", 0xF525),
    ("oct_tag", 0xF412),
    ("oct_tasklist", 0xF4A0),
    ("oct_telescope", 0xF46B),
    ("oct_telescope_fill", 0xF526),
    ("oct_terminal", 0xF489),
    ("oct_three_bars", 0xF44E),
    ("oct_thumbsdown", 0xF497),
    ("oct_thumbsup", 0xF496),
    ("oct_tools", 0xF425),
    ("oct_trash", 0xF48E),
    ("oct_triangle_down", 0xF44B),
    ("oct_triangle_left", 0xF438),
    ("oct_triangle_right", 0xF44A),
    ("oct_triangle_up", 0xF47E),
    ("oct_trophy", 0xF527),
    ("oct_typography", 0xF528),
    ("oct_unfold", 0xF42D),
    ("oct_unlink", 0xF529),
    ("oct_unlock", 0xF52A),
    ("oct_unmute", 0xF485),
    ("oct_unread", 0xF52B),
    ("oct_unverified", 0xF4A3),
    ("oct_upload", 0xF40A),
    ("oct_verified", 0xF4A1),
    ("oct_versions", 0xF454),
    ("oct_video", 0xF52C),
    ("oct_webhook", 0xF52D),
    ("oct_workflow", 0xF52E),
    ("oct_x", 0xF467),
    ("oct_x_circle", 0xF52F),
    ("oct_x_circle_fill", 0xF530),
    ("oct_zap", 0x26A1),
    ("oct_zoom_in", 0xF531),
    ("oct_zoom_out", 0xF532),
    ("pl_branch", 0xE0A0),
    ("pl_current_line", 0xE0A1),
    ("pl_hostname", 0xE0A2),
    ("pl_left_hard_divider", 0xE0B0),
    ("pl_left_soft_divider", 0xE0B1),
    ("pl_line_number", 0xE0A1),
    ("pl_readonly", 0xE0A2),
    ("pl_right_hard_divider", 0xE0B2),
    ("pl_right_soft_divider", 0xE0B3),
    ("ple_backslash_separator", 0xE0B9),
    ("ple_backslash_separator_redundant", 0xE0BF),
    ("ple_column_number", 0xE0A3),
    ("ple_current_column", 0xE0A3),
    ("ple_flame_thick", 0xE0C0),
    ("ple_flame_thick_mirrored", 0xE0C2),
    ("ple_flame_thin", 0xE0C1),
    ("ple_flame_thin_mirrored", 0xE0C3),
    ("ple_forwardslash_separator", 0xE0BB),
    ("ple_forwardslash_separator_redundant", 0xE0BD),
    ("ple_honeycomb", 0xE0CC),
    ("ple_honeycomb_outline", 0xE0CD),
    ("ple_ice_waveform", 0xE0C8),
    ("ple_ice_waveform_mirrored", 0xE0CA),
    ("ple_left_half_circle_thick", 0xE0B6),
    ("ple_left_half_circle_thin", 0xE0B7),
    ("ple_left_hard_divider_inverse", 0xE0D7),
    ("ple_lego_block_facing", 0xE0D0),
    ("ple_lego_block_sideways", 0xE0D1),
    ("ple_lego_separator", 0xE0CE),
    ("ple_lego_separator_thin", 0xE0CF),
    ("ple_lower_left_triangle", 0xE0B8),
    ("ple_lower_right_triangle", 0xE0BA),
    ("ple_pixelated_squares_big", 0xE0C6),
    ("ple_pixelated_squares_big_mirrored", 0xE0C7),
    ("ple_pixelated_squares_small", 0xE0C4),
    ("ple_pixelated_squares_small_mirrored", 0xE0C5),
    ("ple_right_half_circle_thick", 0xE0B4),
    ("ple_right_half_circle_thin", 0xE0B5),
    ("ple_right_hard_divider_inverse", 0xE0D6),
    ("ple_trapezoid_top_bottom", 0xE0D2),
    ("ple_trapezoid_top_bottom_mirrored", 0xE0D4),
    ("ple_upper_left_triangle", 0xE0BC),
    ("ple_upper_right_triangle", 0xE0BE),
    ("pom_away", 0xE007),
    ("pom_clean_code", 0xE000),
    ("pom_external_interruption", 0xE00A),
    ("pom_internal_interruption", 0xE009),
    ("pom_long_pause", 0xE006),
    ("pom_pair_programming", 0xE008),
    ("pom_pomodoro_done", 0xE001),
    ("pom_pomodoro_estimated", 0xE002),
    ("pom_pomodoro_squashed", 0xE004),
    ("pom_pomodoro_ticking", 0xE003),
    ("pom_short_pause", 0xE005),
    ("seti_apple", 0xE635),
    ("seti_argdown", 0xE636),
    ("seti_asm", 0xE637),
    ("seti_audio", 0xE638),
    ("seti_babel", 0xE639),
    ("seti_bazel", 0xE63A),
    ("seti_bicep", 0xE63B),
    ("seti_bower", 0xE61A),
    ("seti_bsl", 0xE63C),
    ("seti_c", 0xE649),
    ("seti_c_sharp", 0xE648),
    ("seti_cake", 0xE63E),
    ("seti_cake_php", 0xE63D),
    ("seti_checkbox", 0xE63F),
    ("seti_checkbox_unchecked", 0xE640),
    ("seti_cjsx", 0xE61B),
    ("seti_clock", 0xE641),
    ("seti_clojure", 0xE642),
    ("seti_code_climate", 0xE643),
    ("seti_code_search", 0xE644),
    ("seti_coffee", 0xE61B),
    ("seti_coldfusion", 0xE645),
    ("seti_config", 0xE615),
    ("seti_cpp", 0xE646),
    ("seti_crystal", 0xE62F),
    ("seti_crystal_embedded", 0xE647),
    ("seti_css", 0xE614),
    ("seti_csv", 0xE64A),
    ("seti_cu", 0xE64B),
    ("seti_d", 0xE651),
    ("seti_dart", 0xE64C),
    ("seti_db", 0xE64D),
    ("seti_default", 0xE64E),
    ("seti_deprecation_cop", 0xE64F),
    ("seti_docker", 0xE650),
    ("seti_editorconfig", 0xE652),
    ("seti_ejs", 0xE618),
    ("seti_elixir", 0xE62D),
    ("seti_elixir_script", 0xE653),
    ("seti_elm", 0xE62C),
    ("seti_error", 0xE654),
    ("seti_eslint", 0xE655),
    ("seti_ethereum", 0xE656),
    ("seti_f_sharp", 0xE65A),
    ("seti_favicon", 0xE623),
    ("seti_firebase", 0xE657),
    ("seti_firefox", 0xE658),
    ("seti_folder", 0xE613),
    ("seti_font", 0xE659),
    ("seti_git", 0xE65D),
    ("seti_git_folder", 0xE65D),
    ("seti_git_ignore", 0xE65D),
    ("seti_github", 0xE65B),
    ("seti_gitlab", 0xE65C),
    ("seti_go", 0xE627),
    ("seti_go2", 0xE65E),
    ("seti_godot", 0xE65F),
    ("seti_gradle", 0xE660),
    ("seti_grails", 0xE661),
    ("seti_graphql", 0xE662),
    ("seti_grunt", 0xE611),
    ("seti_gulp", 0xE610),
    ("seti_hacklang", 0xE663),
    ("seti_haml", 0xE664),
    ("seti_happenings", 0xE665),
    ("seti_haskell", 0xE61F),
    ("seti_haxe", 0xE666),
    ("seti_heroku", 0xE607),
    ("seti_hex", 0xE667),
    ("seti_home", 0xE617),
    ("seti_html", 0xE60E),
    ("seti_ignored", 0xE668),
    ("seti_illustrator", 0xE669),
    ("seti_image", 0xE60D),
    ("seti_info", 0xE66A),
    ("seti_ionic", 0xE66B),
    ("seti_jade", 0xE66C),
    ("seti_java", 0xE66D),
    ("seti_javascript", 0xE60C),
    ("seti_jenkins", 0xE66E),
    ("seti_jinja", 0xE66F),
    ("seti_json", 0xE60B),
    ("seti_julia", 0xE624),
    ("seti_karma", 0xE622),
    ("seti_kotlin", 0xE634),
    ("seti_less", 0xE60B),
    ("seti_license", 0xE60A),
    ("seti_liquid", 0xE670),
    ("seti_livescript", 0xE671),
    ("seti_lock", 0xE672),
    ("seti_lua", 0xE620),
    ("seti_makefile", 0xE673),
    ("seti_markdown", 0xE609),
    ("seti_maven", 0xE674),
    ("seti_mdo", 0xE675),
    ("seti_mustache", 0xE60F),
    ("seti_new_file", 0xE676),
    ("seti_nim", 0xE677),
    ("seti_notebook", 0xE678),
    ("seti_npm", 0xE616),
    ("seti_npm_ignored", 0xE616),
    ("seti_nunjucks", 0xE679),
    ("seti_ocaml", 0xE67A),
    ("seti_odata", 0xE67B),
    ("seti_pddl", 0xE67C),
    ("seti_pdf", 0xE67D),
    ("seti_perl", 0xE67E),
    ("seti_photoshop", 0xE67F),
    ("seti_php", 0xE608),
    ("seti_pipeline", 0xE680),
    ("seti_plan", 0xE681),
    ("seti_platformio", 0xE682),
    ("seti_play_arrow", 0xE602),
    ("seti_powershell", 0xE683),
    ("seti_prisma", 0xE684),
    ("seti_project", 0xE601),
    ("seti_prolog", 0xE685),
    ("seti_pug", 0xE686),
    ("seti_puppet", 0xE631),
    ("seti_purescript", 0xE630),
    ("seti_python", 0xE606),
    ("seti_r", 0xE68A),
    ("seti_rails", 0xE604),
    ("seti_react", 0xE625),
    ("seti_reasonml", 0xE687),
    ("seti_rescript", 0xE688),
    ("seti_rollup", 0xE689),
    ("seti_ruby", 0xE605),
    ("seti_rust", 0xE68B),
    ("seti_salesforce", 0xE68C),
    ("seti_sass", 0xE603),
    ("seti_sbt", 0xE68D),
    ("seti_scala", 0xE68E),
    ("seti_search", 0xE68F),
    ("seti_settings", 0xE690),
    ("seti_shell", 0xE691),
    ("seti_slim", 0xE692),
    ("seti_smarty", 0xE693),
    ("seti_spring", 0xE694),
    ("seti_stylelint", 0xE695),
    ("seti_stylus", 0xE600),
    ("seti_sublime", 0xE696),
    ("seti_svelte", 0xE697),
    ("seti_svg", 0xE698),
    ("seti_swift", 0xE699),
    ("seti_terraform", 0xE69A),
    ("seti_tex", 0xE69B),
    ("seti_text", 0xE64E),
    ("seti_time_cop", 0xE641),
    ("seti_todo", 0xE69C),
    ("seti_tsconfig", 0xE69D),
    ("seti_twig", 0xE61C),
    ("seti_typescript", 0xE628),
    ("seti_vala", 0xE69E),
    ("seti_video", 0xE69F),
    ("seti_vue", 0xE6A0),
    ("seti_wasm", 0xE6A1),
    ("seti_wat", 0xE6A2),
    ("seti_webpack", 0xE6A3),
    ("seti_wgt", 0xE6A4),
    ("seti_word", 0xE6A5),
    ("seti_xls", 0xE6A6),
    ("seti_xml", 0xE619),
    ("seti_yarn", 0xE6A7),
    ("seti_yml", 0xE6A8),
    ("seti_zig", 0xE6A9),
    ("seti_zip", 0xE6AA),
    ("weather_alien", 0xE36E),
    ("weather_aliens", 0xE345),
    ("weather_barometer", 0xE372),
    ("weather_celsius", 0xE339),
    ("weather_cloud", 0xE33D),
    ("weather_cloud_down", 0xE33A),
    ("weather_cloud_refresh", 0xE33B),
    ("weather_cloud_up", 0xE33C),
    ("weather_cloudy", 0xE312),
    ("weather_cloudy_gusts", 0xE310),
    ("weather_cloudy_windy", 0xE311),
    ("weather_day_cloudy", 0xE302),
    ("weather_day_cloudy_gusts", 0xE300),
    ("weather_day_cloudy_high", 0xE376),
    ("weather_day_cloudy_windy", 0xE301),
    ("weather_day_fog", 0xE303),
    ("weather_day_hail", 0xE304),
    ("weather_day_haze", 0xE3AE),
    ("weather_day_light_wind", 0xE3BC),
    ("weather_day_lightning", 0xE305),
    ("weather_day_rain", 0xE308),
    ("weather_day_rain_mix", 0xE306),
    ("weather_day_rain_wind", 0xE307),
    ("weather_day_showers", 0xE309),
    ("weather_day_sleet", 0xE3AA),
    ("weather_day_sleet_storm", 0xE362),
    ("weather_day_snow", 0xE30A),
    ("weather_day_snow_thunderstorm", 0xE365),
    ("weather_day_snow_wind", 0xE35F),
    ("weather_day_sprinkle", 0xE30B),
    ("weather_day_storm_showers", 0xE30E),
    ("weather_day_sunny", 0xE30D),
    ("weather_day_sunny_overcast", 0xE30C),
    ("weather_day_thunderstorm", 0xE30F),
    ("weather_day_windy", 0xE37D),
    ("weather_degrees", 0xE33E),
    ("weather_direction_down", 0xE340),
    ("weather_direction_down_left", 0xE33F),
    ("weather_direction_down_right", 0xE380),
    ("weather_direction_left", 0xE344),
    ("weather_direction_right", 0xE349),
    ("weather_direction_up", 0xE353),
    ("weather_direction_up_left", 0xE37F),
    ("weather_direction_up_right", 0xE352),
    ("weather_dust", 0xE35D),
    ("weather_earthquake", 0xE3BE),
    ("weather_fahrenheit", 0xE341),
    ("weather_fire", 0xE3BF),
    ("weather_flood", 0xE375),
    ("weather_fog", 0xE313),
    ("weather_gale_warning", 0xE3C5),
    ("weather_hail", 0xE314),
    ("weather_horizon", 0xE343),
    ("weather_horizon_alt", 0xE342),
    ("weather_hot", 0xE36B),
    ("weather_humidity", 0xE373),
    ("weather_hurricane", 0xE36C),
    ("weather_hurricane_warning", 0xE3C7),
    ("weather_lightning", 0xE315),
    ("weather_lunar_eclipse", 0xE369),
    ("weather_meteor", 0xE36A),
    ("weather_moon_alt_first_quarter", 0xE3CE),
    ("weather_moon_alt_full", 0xE3D5),
    ("weather_moon_alt_new", 0xE3E3),
    ("weather_moon_alt_third_quarter", 0xE3DC),
    ("weather_moon_alt_waning_crescent_1", 0xE3DD),
    ("weather_moon_alt_waning_crescent_2", 0xE3DE),
    ("weather_moon_alt_waning_crescent_3", 0xE3DF),
    ("weather_moon_alt_waning_crescent_4", 0xE3E0),
    ("weather_moon_alt_waning_crescent_5", 0xE3E1),
    ("weather_moon_alt_waning_crescent_6", 0xE3E2),
    ("weather_moon_alt_waning_gibbous_1", 0xE3D6),
    ("weather_moon_alt_waning_gibbous_2", 0xE3D7),
    ("weather_moon_alt_waning_gibbous_3", 0xE3D8),
    ("weather_moon_alt_waning_gibbous_4", 0xE3D9),
    ("weather_moon_alt_waning_gibbous_5", 0xE3DA),
    ("weather_moon_alt_waning_gibbous_6", 0xE3DB),
    ("weather_moon_alt_waxing_crescent_1", 0xE3C8),
    ("weather_moon_alt_waxing_crescent_2", 0xE3C9),
    ("weather_moon_alt_waxing_crescent_3", 0xE3CA),
    ("weather_moon_alt_waxing_crescent_4", 0xE3CB),
    ("weather_moon_alt_waxing_crescent_5", 0xE3CC),
    ("weather_moon_alt_waxing_crescent_6", 0xE3CD),
    ("weather_moon_alt_waxing_gibbous_1", 0xE3CF),
    ("weather_moon_alt_waxing_gibbous_2", 0xE3D0),
    ("weather_moon_alt_waxing_gibbous_3", 0xE3D1),
    ("weather_moon_alt_waxing_gibbous_4", 0xE3D2),
    ("weather_moon_alt_waxing_gibbous_5", 0xE3D3),
    ("weather_moon_alt_waxing_gibbous_6", 0xE3D4),
    ("weather_moon_first_quarter", 0xE394),
    ("weather_moon_full", 0xE39B),
    ("weather_moon_new", 0xE38D),
    ("weather_moon_third_quarter", 0xE3A2),
    ("weather_moon_waning_crescent_1", 0xE3A3),
    ("weather_moon_waning_crescent_2", 0xE3A4),
    ("weather_moon_waning_crescent_3", 0xE3A5),
    ("weather_moon_waning_crescent_4", 0xE3A6),
    ("weather_moon_waning_crescent_5", 0xE3A7),
    ("weather_moon_waning_crescent_6", 0xE3A8),
    ("weather_moon_waning_gibbous_1", 0xE39C),
    ("weather_moon_waning_gibbous_2", 0xE39D),
    ("weather_moon_waning_gibbous_3", 0xE39E),
    ("weather_moon_waning_gibbous_4", 0xE39F),
    ("weather_moon_waning_gibbous_5", 0xE3A0),
    ("weather_moon_waning_gibbous_6", 0xE3A1),
    ("weather_moon_waxing_crescent_1", 0xE38E),
    ("weather_moon_waxing_crescent_2", 0xE38F),
    ("weather_moon_waxing_crescent_3", 0xE390),
    ("weather_moon_waxing_crescent_4", 0xE391),
    ("weather_moon_waxing_crescent_5", 0xE392),
    ("weather_moon_waxing_crescent_6", 0xE393),
    ("weather_moon_waxing_gibbous_1", 0xE395),
    ("weather_moon_waxing_gibbous_2", 0xE396),
    ("weather_moon_waxing_gibbous_3", 0xE397),
    ("weather_moon_waxing_gibbous_4", 0xE398),
    ("weather_moon_waxing_gibbous_5", 0xE399),
    ("weather_moon_waxing_gibbous_6", 0xE39A),
    ("weather_moonrise", 0xE3C1),
    ("weather_moonset", 0xE3C2),
    ("weather_na", 0xE374),
    ("weather_night_alt_cloudy", 0xE37E),
    ("weather_night_alt_cloudy_gusts", 0xE31F),
    ("weather_night_alt_cloudy_high", 0xE377),
    ("weather_night_alt_cloudy_windy", 0xE320),
    ("weather_night_alt_hail", 0xE321),
    ("weather_night_alt_lightning", 0xE322),
    ("weather_night_alt_partly_cloudy", 0xE379),
    ("weather_night_alt_rain", 0xE325),
    ("weather_night_alt_rain_mix", 0xE323),
    ("weather_night_alt_rain_wind", 0xE324),
    ("weather_night_alt_showers", 0xE326),
    ("weather_night_alt_sleet", 0xE3AC),
    ("weather_night_alt_sleet_storm", 0xE364),
    ("weather_night_alt_snow", 0xE327),
    ("weather_night_alt_snow_thunderstorm", 0xE367),
    ("weather_night_alt_snow_wind", 0xE361),
    ("weather_night_alt_sprinkle", 0xE328),
    ("weather_night_alt_storm_showers", 0xE329),
    ("weather_night_alt_thunderstorm", 0xE32A),
    ("weather_night_clear", 0xE32B),
    ("weather_night_cloudy", 0xE32E),
    ("weather_night_cloudy_gusts", 0xE32C),
    ("weather_night_cloudy_high", 0xE378),
    ("weather_night_cloudy_windy", 0xE32D),
    ("weather_night_fog", 0xE346),
    ("weather_night_hail", 0xE32F),
    ("weather_night_lightning", 0xE330),
    ("weather_night_partly_cloudy", 0xE37B),
    ("weather_night_rain", 0xE333),
    ("weather_night_rain_mix", 0xE331),
    ("weather_night_rain_wind", 0xE332),
    ("weather_night_showers", 0xE334),
    ("weather_night_sleet", 0xE3AB),
    ("weather_night_sleet_storm", 0xE363),
    ("weather_night_snow", 0xE335),
    ("weather_night_snow_thunderstorm", 0xE366),
    ("weather_night_snow_wind", 0xE360),
    ("weather_night_sprinkle", 0xE336),
    ("weather_night_storm_showers", 0xE337),
    ("weather_night_thunderstorm", 0xE338),
    ("weather_rain", 0xE318),
    ("weather_rain_mix", 0xE316),
    ("weather_rain_wind", 0xE317),
    ("weather_raindrop", 0xE371),
    ("weather_raindrops", 0xE34A),
    ("weather_refresh", 0xE348),
    ("weather_refresh_alt", 0xE347),
    ("weather_sandstorm", 0xE37A),
    ("weather_showers", 0xE319),
    ("weather_sleet", 0xE3AD),
    ("weather_small_craft_advisory", 0xE3C4),
    ("weather_smog", 0xE36D),
    ("weather_smoke", 0xE35C),
    ("weather_snow", 0xE31A),
    ("weather_snow_wind", 0xE35E),
    ("weather_snowflake_cold", 0xE36F),
    ("weather_solar_eclipse", 0xE368),
    ("weather_sprinkle", 0xE31B),
    ("weather_stars", 0xE370),
    ("weather_storm_showers", 0xE31C),
    ("weather_storm_warning", 0xE3C6),
    ("weather_strong_wind", 0xE34B),
    ("weather_sunrise", 0xE34C),
    ("weather_sunset", 0xE34D),
    ("weather_thermometer", 0xE350),
    ("weather_thermometer_exterior", 0xE34E),
    ("weather_thermometer_internal", 0xE34F),
    ("weather_thunderstorm", 0xE31D),
    ("weather_time_1", 0xE382),
    ("weather_time_10", 0xE38B),
    ("weather_time_11", 0xE38C),
    ("weather_time_12", 0xE381),
    ("weather_time_2", 0xE383),
    ("weather_time_3", 0xE384),
    ("weather_time_4", 0xE385),
    ("weather_time_5", 0xE386),
    ("weather_time_6", 0xE387),
    ("weather_time_7", 0xE388),
    ("weather_time_8", 0xE389),
    ("weather_time_9", 0xE38A),
    ("weather_tornado", 0xE351),
    ("weather_train", 0xE3C3),
    ("weather_tsunami", 0xE3BD),
    ("weather_umbrella", 0xE37C),
    ("weather_volcano", 0xE3C0),
    ("weather_wind_beaufort_0", 0xE3AF),
    ("weather_wind_beaufort_1", 0xE3B0),
    ("weather_wind_beaufort_10", 0xE3B9),
    ("weather_wind_beaufort_11", 0xE3BA),
    ("weather_wind_beaufort_12", 0xE3BB),
    ("weather_wind_beaufort_2", 0xE3B1),
    ("weather_wind_beaufort_3", 0xE3B2),
    ("weather_wind_beaufort_4", 0xE3B3),
    ("weather_wind_beaufort_5", 0xE3B4),
    ("weather_wind_beaufort_6", 0xE3B5),
    ("weather_wind_beaufort_7", 0xE3B6),
    ("weather_wind_beaufort_8", 0xE3B7),
    ("weather_wind_beaufort_9", 0xE3B8),
    ("weather_wind_direction", 0xE3A9),
    ("weather_wind_east", 0xE35B),
    ("weather_wind_north", 0xE35A),
    ("weather_wind_north_east", 0xE359),
    ("weather_wind_north_west", 0xE358),
    ("weather_wind_south", 0xE357),
    ("weather_wind_south_east", 0xE356),
    ("weather_wind_south_west", 0xE355),
    ("weather_wind_west", 0xE354),
    ("weather_windy", 0xE31E),
)


def nerd_font_rows() -> Iterable[Tuple[str, int, CharSelectGroup]]:
    for name, cp in NERD_FONT_GLYPHS:
        yield name, cp, CharSelectGroup.NERD_FONTS
